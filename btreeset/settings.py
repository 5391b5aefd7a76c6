# The minimum degree used when a tree is constructed without an explicit
# order. Every node other than the root holds between `DEFAULT_ORDER - 1` and
# `2 * DEFAULT_ORDER - 1` keys.
#
# A higher value gives a shallower tree with wider nodes. Since the whole tree
# lives in memory there is no page size to match, so the smallest legal value
# is used which also exercises splits and merges the most.
DEFAULT_ORDER = 2

# Should the tree validate all of its structural invariants (sortedness,
# occupancy, child counts and leaf depth) after every insert and delete? This
# walks the entire tree, turning every mutation into O(n). Meant for debugging
# and tests only.
CHECK_INVARIANTS = False

# Prompt shown by the interactive shell.
SHELL_PROMPT = "[insert [N] | delete [N] | inspect | quit] > "
