"""Git installation sub-gateway.

This module provides a gateway for checking that a usable git executable exists.

Import from submodules:
- abc: GitInstallation, GitProbe
- real: RealGitInstallation
- fake: FakeGitInstallation
"""
