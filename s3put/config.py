import argparse, os, sys
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Tuple

import boto3

from .acl import lookup_acl
from .errors import ConfigError, UnknownRegionError, UsageError

DEFAULT_ACL = "private"
DEFAULT_REGION = "us-west-1"


@dataclass(frozen=True)
class Config:
    acl: str
    region: str
    bucket: str
    access_key: str
    secret_key: str
    prefix: str
    files: Tuple[str, ...]


def supported_regions():
    # botocore's bundled endpoint data, no network round trip
    return boto3.session.Session().get_available_regions("s3")


def _env(environ: Mapping[str, str], name: str, default: str = "") -> str:
    # an empty variable counts as unset
    return environ.get(name) or default


def build_parser(environ: Optional[Mapping[str, str]] = None, prog: Optional[str] = None):
    env = os.environ if environ is None else environ
    p = argparse.ArgumentParser(
        prog=prog,
        usage="%(prog)s [flags] <filenames to upload>",
        allow_abbrev=False,
    )
    p.add_argument("-acl", dest="acl", default=_env(env, "S3_ACL", DEFAULT_ACL), help="ACL (S3_ACL variable)")
    p.add_argument("-reg", dest="region", default=_env(env, "S3_REGION", DEFAULT_REGION), help="region (S3_REGION variable)")
    p.add_argument("-b", dest="bucket", default=_env(env, "S3_BUCKET"), help="bucket (S3_BUCKET variable)")
    p.add_argument("-ak", dest="access_key", default=_env(env, "S3_ACCESS_KEY"), help="access key (S3_ACCESS_KEY variable)")
    p.add_argument("-sk", dest="secret_key", default=_env(env, "S3_SECRET_KEY"), help="secret key (S3_SECRET_KEY variable)")
    p.add_argument("-p", dest="prefix", default="", help="prefix path to add to uploaded filename (subdirectory)")
    p.add_argument("files", nargs="*", metavar="FILE")
    return p


def format_usage(parser) -> str:
    return parser.format_help().replace("usage:", "Usage:", 1)


def print_usage(parser, file=None):
    (file or sys.stderr).write(format_usage(parser))


def resolve_config(argv: Optional[Sequence[str]] = None, environ: Optional[Mapping[str, str]] = None, parser=None) -> Config:
    """Parse ``argv`` on top of the environment defaults and validate the result.

    Precedence is flag, then environment variable, then built-in default.
    Checks run in a fixed order and the first failure is raised: missing
    files (UsageError), missing bucket, missing credentials, unknown region,
    unknown ACL (all ConfigError).
    """
    if parser is None:
        parser = build_parser(environ)
    args = parser.parse_args(argv)

    if not args.files:
        raise UsageError("no files to upload")
    if not args.bucket:
        raise ConfigError("No bucket name given")
    if not args.access_key or not args.secret_key:
        raise ConfigError("Both AccessKey and SecretKey should be set")
    regions = supported_regions()
    if args.region not in regions:
        raise UnknownRegionError(args.region, regions)
    acl = lookup_acl(args.acl)

    return Config(
        acl=acl,
        region=args.region,
        bucket=args.bucket,
        access_key=args.access_key,
        secret_key=args.secret_key,
        prefix=args.prefix,
        files=tuple(args.files),
    )
