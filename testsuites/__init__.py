"""
Test suites package.

Keeps `testsuites` importable so shared helpers can be imported by path:
  - testsuites.ui_testing.framework: self-healing locator framework
  - testsuites.ui_testing.pages: SauceDemo page objects
  - testsuites.unit.fake_page: browserless page double for unit tests
"""
