"""flowlanes: lay out text-defined flowcharts with collision-free edge lanes."""

__version__ = "0.1.0"
