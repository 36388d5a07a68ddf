"""Parley: session controller for an embeddable chat widget.

The package owns the conversational state of a single visitor talking to an
automated assistant: the message log, the pending-reply queue, the
single-responder typing protocol and the tab-scoped persistence behind it.
Rendering is left to whatever host observes the engine.
"""

__version__ = "0.1.0"
