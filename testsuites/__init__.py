"""
Storefront authentication test suites.

  - ui_testing: Playwright interaction layer, Page Objects and live scenarios
  - unit: offline tests of the interaction layer against mocked pages

Credentials shipped in config/ are placeholders only.
"""
