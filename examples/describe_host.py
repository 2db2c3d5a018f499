"""Print the environment tuple of this host and a description for error reports."""

from hostenv import get_environment_tuple, humanize_environment

parts = get_environment_tuple()
print("-".join(parts))

# Explicit tuples, e.g. captured on another machine, are described the same way
print(humanize_environment(parts))
print(humanize_environment(["linux_musl", "x64", "48"]))
