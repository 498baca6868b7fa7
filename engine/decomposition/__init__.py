"""
Decomposition subpackage for the Seasonal ESD engine.

Re-exports :class:`Decomposition` and :func:`decompose` from
:mod:`engine.decomposition.robust` so callers can import them from
``engine.decomposition``.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.decomposition.robust import Decomposition, decompose

__all__ = ["Decomposition", "decompose"]
