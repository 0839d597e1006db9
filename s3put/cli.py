import logging, sys

from . import uploader
from .config import build_parser, print_usage, resolve_config
from .errors import S3PutError, UnknownChoiceError, UsageError

logger = logging.getLogger("s3put")

PLAIN_FORMAT = logging.Formatter("%(message)s")
TIMED_FORMAT = logging.Formatter("%(asctime)s %(message)s", datefmt="%H:%M:%S")


def setup_logging():
    for h in list(logger.handlers):
        logger.removeHandler(h)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(PLAIN_FORMAT)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    return handler


def _report(e: S3PutError):
    logger.error("%s", e)
    if isinstance(e, UnknownChoiceError):
        logger.error("Supported %s are:", e.plural)
        for name in e.choices:
            logger.error("- %s", name)


def main(argv=None, prog=None) -> int:
    handler = setup_logging()
    parser = build_parser(prog=prog)
    try:
        config = resolve_config(argv, parser=parser)
    except UsageError as e:
        print_usage(parser)
        return e.exit_code
    except S3PutError as e:
        _report(e)
        return e.exit_code

    handler.setFormatter(TIMED_FORMAT)
    try:
        bucket = uploader.open_bucket(config)
        for f in config.files:
            uploader.upload(bucket, config, f)
    except S3PutError as e:
        _report(e)
        return e.exit_code
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
