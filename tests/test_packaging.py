"""
Test cases for project packaging metadata.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def test_project_declares_no_readme():
    text = (ROOT / "pyproject.toml").read_text()
    assert "readme" not in text
    assert "SPEC_FULL" not in text
