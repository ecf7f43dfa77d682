"""Tests for CommandRunner class.

CommandRunner captures the output of tool invocations such as
``xcodebuild -version``.
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from buildreqs.exceptions import WorkingDirectoryError
from buildreqs.runners.command import CommandRunner
from buildreqs.runners.models import CommandResult


class TestCommandRunner:
    """Tests for CommandRunner class."""

    @pytest.mark.asyncio
    async def test_run_simple_command(self, mock_subprocess: MagicMock) -> None:
        """A simple command returns a populated CommandResult."""
        with patch(
            "asyncio.create_subprocess_exec", AsyncMock(return_value=mock_subprocess)
        ):
            runner = CommandRunner()
            result = await runner.run(["xcodebuild", "-version"])

        assert isinstance(result, CommandResult)
        assert result.returncode == 0
        assert result.stdout == "stdout output"
        assert result.stderr == ""
        assert result.success is True
        assert result.duration_ms >= 0

    @pytest.mark.asyncio
    async def test_run_command_with_stderr(self, mock_subprocess: MagicMock) -> None:
        mock_subprocess.communicate = AsyncMock(return_value=(b"out", b"err"))

        with patch(
            "asyncio.create_subprocess_exec", AsyncMock(return_value=mock_subprocess)
        ):
            result = await CommandRunner().run(["some", "command"])

        assert result.stdout == "out"
        assert result.stderr == "err"
        assert result.output == "out\nerr"

    @pytest.mark.asyncio
    async def test_nonzero_exit(self, mock_subprocess: MagicMock) -> None:
        mock_subprocess.returncode = 1
        mock_subprocess.communicate = AsyncMock(return_value=(b"", b"failed"))

        with patch(
            "asyncio.create_subprocess_exec", AsyncMock(return_value=mock_subprocess)
        ):
            result = await CommandRunner().run(["false"])

        assert result.success is False
        assert result.returncode == 1

    @pytest.mark.asyncio
    async def test_undecodable_output_is_replaced(
        self, mock_subprocess: MagicMock
    ) -> None:
        mock_subprocess.communicate = AsyncMock(return_value=(b"Xcode \xff7.0", b""))

        with patch(
            "asyncio.create_subprocess_exec", AsyncMock(return_value=mock_subprocess)
        ):
            result = await CommandRunner().run(["xcodebuild", "-version"])

        assert result.stdout == "Xcode �7.0"

    @pytest.mark.asyncio
    async def test_command_not_found(self) -> None:
        with patch(
            "asyncio.create_subprocess_exec",
            AsyncMock(side_effect=FileNotFoundError()),
        ):
            result = await CommandRunner().run(["nonexistent_cmd_xyz"])

        assert result.returncode == 127
        assert "nonexistent_cmd_xyz" in result.stderr
        assert result.success is False

    @pytest.mark.asyncio
    async def test_permission_denied(self) -> None:
        with patch(
            "asyncio.create_subprocess_exec",
            AsyncMock(side_effect=PermissionError()),
        ):
            result = await CommandRunner().run(["./not-executable"])

        assert result.returncode == 126
        assert "Permission denied" in result.stderr

    @pytest.mark.asyncio
    async def test_exec_format_error(self) -> None:
        with patch(
            "asyncio.create_subprocess_exec",
            AsyncMock(side_effect=OSError(8, "Exec format error")),
        ):
            result = await CommandRunner().run(["xcodebuild", "-version"])

        assert result.returncode == 126
        assert "Cannot execute xcodebuild" in result.stderr
        assert "Exec format error" in result.stderr

    @pytest.mark.asyncio
    async def test_working_directory_validation(self) -> None:
        runner = CommandRunner(cwd=Path("/nonexistent/path/xyz"))

        with pytest.raises(WorkingDirectoryError) as exc_info:
            await runner.run(["echo", "test"])

        assert "/nonexistent/path/xyz" in str(exc_info.value.path)

    @pytest.mark.asyncio
    async def test_cwd_override(
        self, mock_subprocess: MagicMock, tmp_path: Path
    ) -> None:
        create = AsyncMock(return_value=mock_subprocess)
        with patch("asyncio.create_subprocess_exec", create):
            await CommandRunner().run(["ls"], cwd=tmp_path)

        assert create.call_args.kwargs["cwd"] == tmp_path

    @pytest.mark.asyncio
    async def test_environment_merge(self, mock_subprocess: MagicMock) -> None:
        """Runner and per-call variables are layered over os.environ."""
        create = AsyncMock(return_value=mock_subprocess)
        with (
            patch.dict(os.environ, {"BASE_VAR": "base"}),
            patch("asyncio.create_subprocess_exec", create),
        ):
            runner = CommandRunner(env={"RUNNER_VAR": "runner", "SHARED": "runner"})
            await runner.run(["env"], env={"SHARED": "call"})

        env = create.call_args.kwargs["env"]
        assert env["BASE_VAR"] == "base"
        assert env["RUNNER_VAR"] == "runner"
        assert env["SHARED"] == "call"

    def test_cwd_property(self, tmp_path: Path) -> None:
        assert CommandRunner(cwd=tmp_path).cwd == tmp_path
        assert CommandRunner().cwd is None
