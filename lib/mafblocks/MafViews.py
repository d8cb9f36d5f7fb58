# Copyright 2016 by Tristan Bitard-Feildel. All rights reserved
"""Arrays built on demand from the sequence lines of a block.

Each function walks the lines of the block once, keeps only the ``s``
lines in their order of appearance and returns a new list, the block is
never modified. Row ``i`` of every array refers to the same sequence line.
"""

from Bio.Align import MultipleSeqAlignment
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord


def get_sequence_lines(block):
    """ list of the sequence lines of a block """
    return list(block.sequence_lines())


def get_sequence_matrix(block, m, fill="-"):
    """ build a character matrix from the alignment of a block

    Parameters
    ==========
    block : MafBlock
        the alignment block
    m : int
        number of columns, longer sequences are truncated
    fill : string
        single character used to pad sequences shorter than m

    Return
    ======
    matrix : list of list
        one row of m characters per sequence line
    """
    if m < 0:
        raise ValueError("number of columns must be positive, not {}".format(m))
    if len(fill) != 1:
        raise ValueError("fill must be a single character, not {!r}".format(fill))
    matrix = []
    for line in get_sequence_lines(block):
        row = list(line.sequence[:m])
        row.extend(fill * (m - len(row)))
        matrix.append(row)
    return matrix


def get_strand_array(block):
    return [line.strand for line in get_sequence_lines(block)]


def get_strand_int_array(block):
    """ strands as 1 (+) or -1 (-) """
    return [1 if line.strand == "+" else -1 for line in get_sequence_lines(block)]


def get_start_array(block):
    return [line.start for line in get_sequence_lines(block)]


def get_source_length_array(block):
    return [line.source_length for line in get_sequence_lines(block)]


def get_sequence_length_array(block):
    """ length fields, i.e. number of aligned bases without gaps """
    return [line.length for line in get_sequence_lines(block)]


def get_pos_coord_start_array(block):
    """ start fields converted to positive strand coordinates

    For - strand lines the position is sourceLength - start - 1, the base
    found at the start offset counted from the end of the source.
    """
    return [line.positive_coord() for line in get_sequence_lines(block)]


def get_pos_coord_left_array(block):
    """ left-most position of each aligned segment on the positive strand,
    sourceLength - (start + length) for - strand lines
    """
    return [line.positive_left_coord() for line in get_sequence_lines(block)]


def get_species_array(block):
    return [str(line.species) for line in get_sequence_lines(block)]


def get_alignment(block):
    """ convert a block to a biopython alignment

    Records are named after the species field and annotated the way
    ``Bio.AlignIO.MafIO`` annotates them (start, size, strand, srcSize).
    All sequences of the block must have the same length.

    Return
    ======
    alignment : MultipleSeqAlignment
        one record per sequence line
    """
    records = []
    for line in get_sequence_lines(block):
        record = SeqRecord(Seq(line.sequence), id=line.species,
                           name=line.species, description="")
        record.annotations["start"] = line.start
        record.annotations["size"] = line.length
        record.annotations["strand"] = 1 if line.strand == "+" else -1
        record.annotations["srcSize"] = line.source_length
        records.append(record)
    return MultipleSeqAlignment(records)
