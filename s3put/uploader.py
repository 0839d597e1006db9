import logging, os, posixpath, stat
from dataclasses import dataclass

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError

from .errors import LocalIOError, RemoteError
from .sniff import SNIFF_LEN, detect_content_type

logger = logging.getLogger("s3put")


@dataclass(frozen=True)
class UploadJob:
    local_path: str
    size: int
    content_type: str
    object_key: str


def object_key(prefix: str, local_path: str) -> str:
    """Key for ``local_path`` under ``prefix``; only the basename is kept."""
    name = posixpath.basename(local_path)
    if not prefix:
        return name
    key = posixpath.normpath(f"{prefix}/{name}")
    # normpath keeps a leading "//"
    if key.startswith("//"):
        key = key[1:]
    return key


def open_bucket(config):
    session = boto3.session.Session(
        aws_access_key_id=config.access_key,
        aws_secret_access_key=config.secret_key,
        region_name=config.region,
    )
    # single-part PUT with a plain Content-Length, no aws-chunked checksum trailer
    s3 = session.resource("s3", config=BotoConfig(request_checksum_calculation="when_required"))
    return s3.Bucket(config.bucket)


def prepare(f, local_path: str, prefix: str = "") -> UploadJob:
    """Stat and sniff an open file, leaving it rewound to offset 0."""
    try:
        st = os.fstat(f.fileno())
        if not stat.S_ISREG(st.st_mode) or not f.seekable():
            raise LocalIOError(f"{local_path}: not a regular file")
        head = f.read(SNIFF_LEN)
        content_type = detect_content_type(head)
        f.seek(0, os.SEEK_SET)
    except OSError as e:
        raise LocalIOError(f"{local_path}: {e.strerror or e}") from e
    return UploadJob(
        local_path=local_path,
        size=st.st_size,
        content_type=content_type,
        object_key=object_key(prefix, local_path),
    )


def upload(bucket, config, local_path: str) -> UploadJob:
    # opening a FIFO with no writer would block
    try:
        st = os.stat(local_path)
    except OSError as e:
        raise LocalIOError(f"stat {local_path}: {e.strerror or e}") from e
    if not stat.S_ISREG(st.st_mode):
        raise LocalIOError(f"{local_path}: not a regular file")
    try:
        f = open(local_path, "rb")
    except OSError as e:
        raise LocalIOError(f"open {local_path}: {e.strerror or e}") from e
    with f:
        job = prepare(f, local_path, config.prefix)
        logger.info("uploading %s (%s)", local_path, job.content_type)
        try:
            bucket.put_object(
                Key=job.object_key,
                Body=f,
                ContentLength=job.size,
                ContentType=job.content_type,
                ACL=config.acl,
            )
        except (BotoCoreError, ClientError) as e:
            raise RemoteError(f"put s3://{config.bucket}/{job.object_key}: {e}") from e
    return job
