"""
Command line tool listing Compute Engine instances of a deployment environment (habitat)
by a name pattern. Listing is delegated to the `gcloud` command-line tool.
"""

__version__ = "0.1.0"
