# Copyright 2016 by Tristan Bitard-Feildel. All rights reserved
"""A MAF block: the header preamble or one alignment, as an ordered list of
:class:`~mafblocks.MafLine.MafLine`.

A block owns its lines, a line can only belong to one block at a time. The
number of lines and of sequence lines are refreshed after every change of
the list so they never drift from its content.
"""

from .MafLine import LineKind


class MafBlock(object):
    """ ordered collection of lines forming one block of a MAF file
    """

    def __init__(self, lines=None, line_number=0):
        self._lines = []
        self._sequence_count = 0
        self.line_number = line_number
        if lines is not None:
            self.extend(lines)

    # ownership
    def _check_adoptable(self, lines, replacing=False):
        """ raise ValueError, before any change, if one of the lines cannot
        be added to the block
        """
        seen = []
        for line in lines:
            if line._owner is not None and line._owner is not self:
                raise ValueError("line {!r} already belongs to another block, "
                                 "use MafLine.copy()".format(line))
            if any(l is line for l in seen) or (
                    not replacing and line._owner is self):
                raise ValueError(
                    "line {!r} is already part of this block".format(line))
            seen.append(line)

    def _adopt(self, line):
        self._check_adoptable([line])
        line._owner = self

    def _release(self, line):
        line._owner = None

    def _refresh_counts(self):
        self._sequence_count = sum(1 for line in self._lines
                                   if line.kind is LineKind.SEQUENCE)

    # read access
    @property
    def lines(self):
        return tuple(self._lines)

    @property
    def head(self):
        """ first line of the block, None if the block is empty """
        return self._lines[0] if self._lines else None

    @property
    def tail(self):
        """ last line of the block, None if the block is empty """
        return self._lines[-1] if self._lines else None

    @property
    def line_count(self):
        return len(self._lines)

    @property
    def sequence_count(self):
        return self._sequence_count

    @property
    def is_header(self):
        return bool(self._lines) and self._lines[0].kind is LineKind.HEADER

    def sequence_lines(self):
        return [line for line in self._lines if line.kind is LineKind.SEQUENCE]

    def contains_sequence(self):
        return self._sequence_count > 0

    def longest_sequence_field(self):
        """ length of the longest sequence field of the block, 0 when the
        block has no sequence line
        """
        return max([len(line.sequence) for line in self.sequence_lines()] or [0])

    # structural changes
    def append(self, line):
        self._adopt(line)
        self._lines.append(line)
        self._refresh_counts()

    def extend(self, lines):
        lines = list(lines)
        self._check_adoptable(lines)
        for line in lines:
            line._owner = self
        self._lines.extend(lines)
        self._refresh_counts()

    def insert(self, index, line):
        self._adopt(line)
        self._lines.insert(index, line)
        self._refresh_counts()

    def remove(self, line):
        for i, candidate in enumerate(self._lines):
            if candidate is line:
                del self._lines[i]
                break
        else:
            raise ValueError("line {!r} is not part of this block".format(line))
        self._release(line)
        self._refresh_counts()

    def pop(self, index=-1):
        line = self._lines.pop(index)
        self._release(line)
        self._refresh_counts()
        return line

    def clear(self):
        for line in self._lines:
            self._release(line)
        self._lines = []
        self._refresh_counts()

    def set_lines(self, lines):
        """ replace all the lines of the block
        """
        lines = list(lines)
        self._check_adoptable(lines, replacing=True)
        self.clear()
        self.extend(lines)

    # text
    def to_string(self, regenerate=False):
        """ text of the block followed by its blank separator line

        Parameters
        ==========
        regenerate : bool
            if True sequence lines are written from their fields instead of
            their raw text
        """
        out = []
        for line in self._lines:
            out.append(line.format() if regenerate else line.raw)
        out.append("")
        return "\n".join(out) + "\n"

    def __iter__(self):
        return iter(self._lines)

    def __len__(self):
        return len(self._lines)

    def __getitem__(self, index):
        return self._lines[index]

    def __repr__(self):
        return "MafBlock(line_number={}, lines={}, sequences={})".format(
            self.line_number, self.line_count, self.sequence_count)

    def __str__(self):
        return self.to_string()


def number_of_blocks(blocks):
    """ number of blocks in a block list (header included)
    """
    return sum(1 for _ in blocks)
