"""CLI tools for Curatorator.

- ``python -m curatorator.cli.report`` - render the similar-artists report
  (also reachable as ``python -m curatorator`` and the ``curatorator``
  console script).
"""
