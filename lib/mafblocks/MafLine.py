# Copyright 2016 by Tristan Bitard-Feildel. All rights reserved
"""A single line of a MAF file and the parser turning raw text into it.

See https://genome.ucsc.edu/FAQ/FAQformat.html#format5 for the format.
Only ``s`` lines are split into fields, every other line is kept as its
raw text together with its kind.
"""

import re
from enum import Enum

from .MafErrors import MalformedLineError

_field_separator = re.compile(r"[ \t]+")
_unsigned = re.compile(r"[0-9]+\Z")

SEQUENCE_FIELDS = ("species", "start", "length", "strand", "source_length",
                   "sequence")

STRANDS = ("+", "-")


class LineKind(Enum):
    ALIGNMENT = "a"
    SEQUENCE = "s"
    INFO = "i"
    EMPTY = "e"
    QUALITY = "q"
    HEADER = "h"  # not a MAF code, given to the lines preceding the first block
    FOOTER = "f"
    COMMENT = "#"


def is_blank(text):
    """ return True if the line is empty or only made of whitespaces
    """
    return not text or text.isspace()


def _parse_unsigned(token, field, line_number):
    if not _unsigned.match(token):
        raise MalformedLineError(
            line_number, field,
            "{} field must be an unsigned integer, not {}.".format(field, token))
    return int(token)


class MafLine(object):
    """ one physical line of a MAF file

    ``raw`` is the text written back by the writer, the structured fields
    are only filled for sequence lines. Both can be changed independently,
    use :meth:`rebuild` to regenerate ``raw`` from the fields.
    """

    def __init__(self, raw, line_number=0, kind=LineKind.HEADER, species=None,
                 start=0, length=0, strand=None, source_length=0,
                 sequence=None):
        self._owner = None
        self._kind = LineKind(kind)
        self._strand = None
        self.raw = raw
        self.line_number = line_number
        self.species = species
        self.start = start
        self.length = length
        if strand is not None:
            self.strand = strand
        self.source_length = source_length
        self.sequence = sequence

    @classmethod
    def from_string(cls, text, line_number):
        """ parse one line of a MAF alignment block

        Parameters
        ==========
        text : string
            the line, without its line terminator
        line_number : int
            1-based position of the line in its file

        Return
        ======
        line : MafLine
            the parsed line, fields are only set for ``s`` lines
        """
        text = text.rstrip("\r\n")
        try:
            kind = LineKind(text[:1])
        except ValueError:
            raise MalformedLineError(
                line_number, "line type",
                "Unknown line type {!r}.".format(text[:1]))
        if kind is not LineKind.SEQUENCE:
            return cls(text, line_number, kind)

        tokens = _field_separator.split(text.strip(" \t"))
        # tokens[0] is the "s" itself
        values = tokens[1:]
        if len(values) < len(SEQUENCE_FIELDS):
            raise MalformedLineError(line_number, SEQUENCE_FIELDS[len(values)])
        if len(values) > len(SEQUENCE_FIELDS):
            raise MalformedLineError(
                line_number, "sequence",
                "Unexpected content after the sequence field: {}.".format(
                    " ".join(values[len(SEQUENCE_FIELDS):])))
        species, start, length, strand, source_length, sequence = values
        if strand not in STRANDS:
            raise MalformedLineError(
                line_number, "strand",
                "Strand must be either + or -, not {}.".format(strand))
        return cls(text, line_number, kind,
                   species=species,
                   start=_parse_unsigned(start, "start", line_number),
                   length=_parse_unsigned(length, "length", line_number),
                   strand=strand,
                   source_length=_parse_unsigned(source_length,
                                                 "source_length", line_number),
                   sequence=sequence)

    @classmethod
    def header(cls, text, line_number):
        """ create a line of the file preamble
        """
        return cls(text.rstrip("\r\n"), line_number, LineKind.HEADER)

    @property
    def kind(self):
        return self._kind

    @kind.setter
    def kind(self, value):
        self._kind = LineKind(value)
        if self._owner is not None:
            self._owner._refresh_counts()

    @property
    def strand(self):
        return self._strand

    @strand.setter
    def strand(self, value):
        if value not in STRANDS:
            raise ValueError("strand must be either + or -, not {!r}".format(value))
        self._strand = value

    @property
    def is_sequence(self):
        return self._kind is LineKind.SEQUENCE

    def positive_coord(self):
        """ start coordinate in positive zero based coordinates

        For - strands this is the right-most base of the aligned segment.
        """
        if self._strand == "+":
            return self.start
        return self.source_length - (self.start + 1)

    def positive_left_coord(self):
        """ left-most coordinate of the aligned segment in positive zero
        based coordinates
        """
        if self._strand == "+":
            return self.start
        return self.source_length - (self.start + self.length)

    def format(self):
        """ text of the line regenerated from its fields

        Lines other than sequence lines have no fields, their raw text is
        returned unchanged.
        """
        if not self.is_sequence:
            return self.raw
        for field in SEQUENCE_FIELDS:
            if getattr(self, field) is None:
                raise ValueError("cannot format sequence line, "
                                 "{} is not set".format(field))
        return "s {} {} {} {} {} {}".format(self.species, self.start,
                                           self.length, self._strand,
                                           self.source_length, self.sequence)

    def rebuild(self):
        """ replace the raw text by the one regenerated from the fields
        """
        self.raw = self.format()
        return self.raw

    def copy(self):
        """ return a new line, not attached to any block, with the same values
        """
        return MafLine(self.raw, self.line_number, self._kind,
                       species=self.species, start=self.start,
                       length=self.length, strand=self._strand,
                       source_length=self.source_length,
                       sequence=self.sequence)

    def _values(self):
        return (self.raw, self.line_number, self._kind, self.species,
                self.start, self.length, self._strand, self.source_length,
                self.sequence)

    def __eq__(self, other):
        if not isinstance(other, MafLine):
            return NotImplemented
        return self._values() == other._values()

    __hash__ = None

    def __repr__(self):
        return "MafLine({!r}, line_number={}, kind={})".format(
            self.raw, self.line_number, self._kind.name)

    def __str__(self):
        return self.raw


def parse_line(text, line_number):
    """ shortcut for :meth:`MafLine.from_string`
    """
    return MafLine.from_string(text, line_number)
