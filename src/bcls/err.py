class BclsException(Exception):
    """Base of all errors reported to the user as `User error: ...`"""


class ConfigFileNotFoundError(BclsException):

    def __init__(self, file):
        self.file = file
        super().__init__(f"Config file `{file}` not found")


class InvalidConfiguration(BclsException):
    pass


class UnknownEnvironment(BclsException):

    def __init__(self, env_id, valid_ids):
        self.env_id = env_id
        self.valid_ids = sorted(valid_ids)
        super().__init__(f"Unknown environment `{env_id}`. Valid environments: {', '.join(self.valid_ids)}")


class ListFailed(BclsException):
    """
    Listing of instances by the external tool failed.
    The diagnostic text of the tool is kept verbatim in `diagnostic`.
    """

    def __init__(self, project, diagnostic):
        self.project = project
        self.diagnostic = diagnostic
        super().__init__(f"Failed to list instances in project `{project}`: {diagnostic}")


class InvalidPattern(BclsException):

    def __init__(self, pattern, reason):
        self.pattern = pattern
        super().__init__(f"Invalid pattern `{pattern}`: {reason}")
