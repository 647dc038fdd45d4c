"""Grid layouts shared by the test suite."""

import textwrap


# The worked example from the duct-routing rules: two ducts.
DOC_EXAMPLE = textwrap.dedent("""\
    4 3
    2 0 0 0
    0 0 0 0
    0 0 3 1
""")

# Small layouts with hand-checked duct counts.
KNOWN_COUNTS = {
    "adjacent_pair": ("2 1\n2 3\n", 1),
    "corridor": ("3 1\n2 0 3\n", 1),
    "corridor_wrong_end": ("3 1\n2 3 0\n", 0),
    "corridor_blocked": ("3 1\n2 1 3\n", 0),
    "square_adjacent": ("2 2\n2 3\n0 0\n", 1),
    "square_diagonal": ("2 2\n2 0\n0 3\n", 0),
    "three_by_three_corners": ("3 3\n2 0 0\n0 0 0\n0 0 3\n", 2),
    "ring": ("3 3\n2 0 0\n3 1 0\n0 0 0\n", 1),
    "two_row_stub": ("3 2\n2 0 0\n0 3 1\n", 0),
    "doc_example": (DOC_EXAMPLE, 2),
}

# Grids small enough for an unpruned search, used to compare pruning modes.
CROSSCHECK_GRIDS = {
    "four_by_four": "4 4\n2 0 0 0\n0 0 0 0\n0 0 0 0\n0 0 0 3\n",
    "four_by_four_side": "4 4\n2 0 0 3\n0 0 0 0\n0 0 0 0\n0 0 0 0\n",
    "four_by_four_blocked": "4 4\n2 0 0 0\n0 1 0 0\n0 0 0 0\n1 0 0 3\n",
    "five_by_two_split": "5 2\n0 0 2 0 3\n0 0 0 0 0\n",
    "five_by_four": "5 4\n2 0 0 0 0\n0 0 1 0 0\n0 0 0 0 0\n1 0 0 0 3\n",
    "five_by_five_sparse": (
        "5 5\n2 0 0 1 1\n0 0 0 0 1\n0 1 0 0 0\n0 0 0 1 0\n1 0 0 0 3\n"
    ),
    "odd_middle_end": "3 3\n2 0 0\n0 3 0\n0 0 0\n",
}
