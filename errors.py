# errors.py


class CfgGenError(Exception):
    """Base class for errors raised around the flowchart pipeline."""


class InputNotFoundError(CfgGenError):
    def __init__(self, path):
        super().__init__(f"Input path does not exist: {path}")
        self.path = path


class SourceReadError(CfgGenError):
    def __init__(self, path, reason):
        super().__init__(f"Failed to read file: {path} ({reason})")
        self.path = path


class OutputWriteError(CfgGenError):
    def __init__(self, path, reason):
        super().__init__(f"Failed to write file: {path} ({reason})")
        self.path = path
