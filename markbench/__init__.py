from ._version import __version__

__all__ = [
  "__version__",
  "synth",
  "subject",
  "driver",
  "scenarios",
  "report",
]
