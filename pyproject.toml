[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bftreplica"
version = "0.1.0"
description = "Data types and bookkeeping for leader-based Byzantine fault tolerant replicas: hashes, groups, accumulators, blocks, peers and clients."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bft",
    "byzantine fault tolerance",
    "consensus",
    "hotstuff",
    "replication",
    "state machine replication",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bftreplica"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
