"""Pytest configuration and shared fixtures for the html2commonmark test suite."""

import os

import pytest

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )
    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed; profiles are not registered
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "property: Property-based tests driven by Hypothesis")


@pytest.fixture
def sample_html() -> str:
    """Provide a small HTML document touching every converted element.

    Returns
    -------
    str
        HTML document with head and body.

    """
    return """<!DOCTYPE html>
<html>
<head><title>Sample</title></head>
<body>
<h1>Sample Document</h1>
<p>This is a <strong>sample</strong> with <em>italic text</em> and <code>inline code</code>.</p>
<ul>
<li>Item 1</li>
<li>Item 2</li>
</ul>
<ol start="2">
<li>Second</li>
</ol>
<pre><code class="language-python">print("hi")
</code></pre>
<blockquote><p>Quoted</p></blockquote>
<hr>
<table><tr><td>cell</td></tr></table>
</body>
</html>
"""
