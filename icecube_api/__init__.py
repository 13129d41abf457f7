# icecube_api/__init__.py

__version__ = "1.0.0"

API_VERSION_INFO = f"Icecube API v{__version__}"
