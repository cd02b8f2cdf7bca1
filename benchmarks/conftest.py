"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_template() -> str:
    """Generate a large template (~100KB) mixing markup and code."""
    sections = []
    for i in range(400):
        sections.append(f"""
<section id="s{i}">
  <h2>{{{{ titles[[{i}]] }}}}</h2>
  <p>Plain paragraph text with a {{ single brace }} and some more words.</p>
  {{{{ if (x %in% y) "it's }}}} here" else `odd }}}} name` # note }}}}
</section>
""")
    return "".join(sections)
