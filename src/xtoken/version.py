from importlib.metadata import PackageNotFoundError, version

try:
    version = version("XToken")
except PackageNotFoundError:
    version = "0.0.0"
