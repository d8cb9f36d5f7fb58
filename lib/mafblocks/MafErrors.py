# Copyright 2016 by Tristan Bitard-Feildel. All rights reserved
"""Exceptions raised while reading or writing MAF files.

Every failure of the reader is reported through one of these classes,
parsing of a file is all or nothing: once an exception has been raised no
partial block list is handed back to the caller.
"""


class MafError(Exception):
    """Base class of all MAF reading / writing errors."""

    def __init__(self, message, filename=None, line_number=None):
        super(MafError, self).__init__(message)
        self.message = message
        self.filename = filename
        self.line_number = line_number

    def __str__(self):
        if self.filename is not None:
            return "{}: {}".format(self.filename, self.message)
        return self.message


class MalformedLineError(MafError):
    """A line does not follow the MAF grammar (missing field, bad strand...)"""

    def __init__(self, line_number, field, reason=None, filename=None):
        if reason is None:
            reason = ("Unable to separate line on tabs and spaces "
                      "at {} field.".format(field))
        message = ("The maf sequence at line {} is incorrectly "
                   "formatted: {}".format(line_number, reason))
        super(MalformedLineError, self).__init__(message, filename, line_number)
        self.field = field
        self.reason = reason


class PrematureEndError(MafError):
    """The file ended where more content was structurally required."""

    def __init__(self, line_number, filename=None):
        message = "premature end to maf file at line {}".format(line_number)
        super(PrematureEndError, self).__init__(message, filename, line_number)


class MissingHeaderError(MafError):
    """Neither a ``track`` nor a ``##maf`` line starts the file."""

    def __init__(self, filename=None, line_number=1):
        message = "maf file does not contain a valid header"
        super(MissingHeaderError, self).__init__(message, filename, line_number)


class MafOpenError(MafError):
    """The underlying path cannot be opened in the requested mode."""

    def __init__(self, filename, mode, cause=None):
        message = "unable to open maf file in mode '{}'".format(mode)
        if cause is not None:
            message = "{} ({})".format(message, cause)
        super(MafOpenError, self).__init__(message, filename)
        self.mode = mode
