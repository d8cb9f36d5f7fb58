# Copyright 2016 by Tristan Bitard-Feildel.  All rights reserved.
"""MAFblocks reads and writes files in the Multiple Alignment Format (MAF,
https://genome.ucsc.edu/FAQ/FAQformat.html#format5) block by block.

A file is read as a list of blocks, the header first, then one block per
alignment. Each block is an ordered list of lines, sequence lines are
parsed into their fields (species, start, length, strand, source length,
sequence). The writer reproduces the original text of every line.

Helper functions build arrays (sequence matrix, strands, coordinates,
species) from the sequence lines of a block.
"""

from .MafErrors import MafError, MafOpenError, MalformedLineError, \
    MissingHeaderError, PrematureEndError
from .MafLine import LineKind, MafLine, is_blank, parse_line
from .MafBlock import MafBlock, number_of_blocks
from .MafFile import MafFile, read_maf, write_maf

__version__ = "1.0"
