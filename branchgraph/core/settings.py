"""
Tunable defaults for branchgraph engines.

Each value can be overridden per engine through its constructor.
"""

# Number of leading branches inspected to decide whether a graph is weighted
WEIGHT_SAMPLE_SIZE = 10

# Candidate paths collected by the constrained shortest-path search
DEFAULT_CANDIDATE_CAP = 100

# Attempts made to synthesize a unique node id
ID_GENERATION_ATTEMPTS = 1000

ID_PREFIX = "node"
