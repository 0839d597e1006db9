class S3PutError(Exception):
    exit_code = 1


class UsageError(S3PutError):
    pass


class ConfigError(S3PutError):
    pass


class UnknownChoiceError(ConfigError):
    kind = "value"
    plural = "values"

    def __init__(self, value, choices):
        self.value = value
        self.choices = sorted(choices)
        super().__init__(f"Invalid {self.kind} provided: {value!r}")


class UnknownRegionError(UnknownChoiceError):
    kind = "region"
    plural = "regions"


class UnknownACLError(UnknownChoiceError):
    kind = "ACL"
    plural = "ACLs"


class LocalIOError(S3PutError):
    pass


class RemoteError(S3PutError):
    pass
