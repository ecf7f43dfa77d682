"""Shared test fixtures for the buildreqs test suite.

Runner Mocks (from tests/fixtures/runners.py)
---------------------------------------------

Fixtures:
    mock_command_runner: CommandRunner mock whose run() reports Xcode 7.2.1.
    xcode_output: Factory for ``xcodebuild -version`` stdout.
    darwin_host / linux_host: Pin the platform seen by the OS gate check.
"""
