"""Shared test fixtures."""

from __future__ import annotations

import pytest


HOME_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" fill="none" stroke="currentColor" stroke-width="2">
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>
  <rect x="9" y="12" width="6" height="9"/>
</svg>'''

VIEWBOX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="48" height="48" viewBox="0 0 24 24">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

NO_SIZE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <circle cx="100" cy="100" r="50"/>
</svg>'''

STYLED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10" style="width:10;display:block">
  <path d="M0 0h10v10H0z" style="fill:red;width:10"/>
  <circle cx="5" cy="5" r="2" style="width:10"/>
</svg>'''

GRADIENT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 20 20">
  <linearGradient id="g" gradientUnits="userSpaceOnUse"><stop offset="0" stop-color="#fff"/></linearGradient>
  <use xlink:href="#shape" width="20" height="20"/>
</svg>'''

NOT_SVG = "export default '/assets/logo.svg'"


@pytest.fixture
def home_svg() -> str:
    return HOME_SVG


@pytest.fixture
def styled_svg() -> str:
    return STYLED_SVG


@pytest.fixture
def gradient_svg() -> str:
    return GRADIENT_SVG
