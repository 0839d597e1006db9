"""Upload local files to an S3 bucket with a canned ACL and a sniffed content-type."""

__version__ = "0.1.0"
