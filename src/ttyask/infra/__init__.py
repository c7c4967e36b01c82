"""Infrastructure layer — concrete terminal collaborators.

This package implements the protocols declared in
:mod:`ttyask.core.protocols`.  It is the only layer that touches
``sys.stdin`` or imports ``rich`` for prompt rendering.
"""
