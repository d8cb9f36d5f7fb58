# Copyright 2016 by Tristan Bitard-Feildel. All rights reserved
"""Read and write MAF files block by block.

A :class:`MafFile` is an open MAF file. When reading, the first call to
:meth:`MafFile.read_block` returns the header (the lines preceding the
first alignment), every following call returns the next alignment block
and ``None`` once the end of the file is reached::

    with MafFile("chr10.maf") as maf:
        for block in maf:
            print(block.line_number, block.sequence_count)

The writer copies the raw text of every line, unless asked to regenerate
the sequence lines from their fields.
"""

import logging
from collections import namedtuple

from .MafBlock import MafBlock
from .MafErrors import MafError, MafOpenError, MissingHeaderError, \
    PrematureEndError
from .MafLine import MafLine, is_blank

logger = logging.getLogger(__name__)

TRACK_MARKER = "track"
MAF_MARKER = "##maf"

PendingLine = namedtuple("PendingLine", ["text", "line_number"])


class Lookahead(object):
    """ holds at most one line read from the file but not yet consumed

    Used when the header is directly followed by an ``a`` line, without a
    blank separator, the ``a`` line is then the first line of the next
    block.
    """

    def __init__(self):
        self._pending = None

    def push(self, text, line_number):
        if self._pending is not None:
            raise RuntimeError("lookahead already holds line {}".format(
                self._pending.line_number))
        self._pending = PendingLine(text, line_number)

    def pop(self):
        """ return the pending line and empty the buffer, None if empty """
        pending, self._pending = self._pending, None
        return pending

    def peek(self):
        return self._pending

    def clear(self):
        self._pending = None

    def __bool__(self):
        return self._pending is not None

    def __len__(self):
        return 0 if self._pending is None else 1


class MafFile(object):
    """ a MAF file opened for reading ("r") or writing ("w")
    """

    def __init__(self, filename, mode="r"):
        if mode not in ("r", "w"):
            raise ValueError("mode must be 'r' or 'w', not {!r}".format(mode))
        self.filename = str(filename)
        self.mode = mode
        self.line_number = 0
        self.lookahead = Lookahead()
        self._header_done = False
        self._failure = None
        try:
            self._handle = open(filename, mode)
        except OSError as err:
            raise MafOpenError(self.filename, mode, err)
        logger.debug("opened %s in mode %s", self.filename, mode)

    @property
    def closed(self):
        return self._handle is None

    def close(self):
        if self._handle is not None:
            self._handle.close()
            self._handle = None
            logger.debug("closed %s after line %d", self.filename,
                         self.line_number)
        self.lookahead.clear()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def _check_mode(self, mode):
        if self._handle is None:
            raise ValueError("I/O operation on closed maf file {}".format(
                self.filename))
        if self.mode != mode:
            raise ValueError("maf file {} is not opened in mode '{}'".format(
                self.filename, mode))
        if self._failure is not None:
            # a parsing error is final for the whole file
            raise self._failure

    # reading
    def _readline(self):
        """ next line of the file without its terminator, None at the end
        """
        line = self._handle.readline()
        if not line:
            return None
        self.line_number += 1
        return line.rstrip("\r\n")

    def _require_line(self):
        line = self._readline()
        if line is None:
            raise PrematureEndError(self.line_number + 1, self.filename)
        return line

    def _fail(self, err):
        if err.filename is None:
            err.filename = self.filename
        self._failure = err
        self.lookahead.clear()
        return err

    def read_header(self):
        """ read the lines preceding the first alignment block

        The file has to start with a ``track`` line or a ``##maf`` line. The
        line following a ``track`` line is always part of the header. The
        header ends on a blank line or on the first ``a`` line, the latter
        is kept for the next call to :meth:`read_body`.

        Return
        ======
        header : MafBlock
            the header block, at least one line long
        """
        self._check_mode("r")
        self._header_done = True
        try:
            header = self._read_header_lines()
        except MafError as err:
            raise self._fail(err)
        logger.debug("%s: header of %d lines", self.filename, header.line_count)
        return header

    def _read_header_lines(self):
        header = MafBlock(line_number=self.line_number + 1)
        line = self._require_line()
        if line.startswith(TRACK_MARKER):
            header.append(MafLine.header(line, self.line_number))
            header.append(MafLine.header(self._require_line(), self.line_number))
        elif line.startswith(MAF_MARKER):
            header.append(MafLine.header(line, self.line_number))
        else:
            raise MissingHeaderError(self.filename, self.line_number)

        line = self._require_line()
        while not line.startswith("a") and not is_blank(line):
            header.append(MafLine.header(line, self.line_number))
            line = self._require_line()
        if line.startswith("a"):
            self.lookahead.push(line, self.line_number)
        return header

    def read_body(self):
        """ read the next alignment block, None at the end of the file
        """
        self._check_mode("r")
        block = MafBlock()
        pending = self.lookahead.pop()
        try:
            if pending is not None:
                block.append(MafLine.from_string(pending.text,
                                                 pending.line_number))
            block.line_number = self.line_number
            while True:
                line = self._readline()
                if line is None:
                    break
                if is_blank(line):
                    if block.line_count == 0:
                        continue
                    break
                block.append(MafLine.from_string(line, self.line_number))
        except MafError as err:
            raise self._fail(err)
        if block.line_count == 0:
            logger.debug("%s: end of file at line %d", self.filename,
                         self.line_number)
            return None
        logger.debug("%s: block at line %d, %d lines, %d sequences",
                     self.filename, block.line_number, block.line_count,
                     block.sequence_count)
        return block

    def read_block(self):
        """ return the header on the first call, then the next alignment
        block, None once the file is exhausted
        """
        if not self._header_done:
            return self.read_header()
        return self.read_body()

    def read_all(self):
        """ read the whole file, header first, and return the list of blocks
        """
        return list(self)

    def __iter__(self):
        block = self.read_block()
        while block is not None:
            yield block
            block = self.read_block()

    # writing
    def write_block(self, block, regenerate=False):
        """ write the lines of a block followed by a blank line

        Parameters
        ==========
        block : MafBlock
            the block to write
        regenerate : bool
            write sequence lines from their fields instead of their raw text
        """
        self._check_mode("w")
        for line in block:
            self._handle.write(line.format() if regenerate else line.raw)
            self._handle.write("\n")
            self.line_number += 1
        self._handle.write("\n")
        self.line_number += 1
        logger.debug("%s: wrote block of %d lines, now at line %d",
                     self.filename, block.line_count, self.line_number)

    def write_all(self, blocks, regenerate=False):
        """ write all the blocks, a final blank line, and close the file
        """
        self._check_mode("w")
        count = 0
        for block in blocks:
            self.write_block(block, regenerate)
            count += 1
        self._handle.write("\n")
        self.line_number += 1
        logger.debug("%s: wrote %d blocks, %d lines", self.filename, count,
                     self.line_number)
        self.close()


def read_maf(filename):
    """ read a MAF file and return its list of blocks, header first
    """
    with MafFile(filename, "r") as maf:
        return maf.read_all()


def write_maf(filename, blocks, regenerate=False):
    """ write a list of blocks to a new MAF file
    """
    with MafFile(filename, "w") as maf:
        maf.write_all(blocks, regenerate)
