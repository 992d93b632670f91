"""
命令行入口测试
"""

import errno
import os
import subprocess
import sys
from pathlib import Path

import pytest

from run_if_needed import RunnerConfig
from run_if_needed.cli import main

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="需要 POSIX 环境")

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


class TestMainScenarios:
    """测试典型调用"""

    def test_no_arguments(self, capfd):
        """无参数: 非零退出并输出用法"""
        assert main([]) == 1

        err = capfd.readouterr().err
        assert "Usage: run-if-needed" in err

    def test_command_only(self, capfd):
        """只有 command: 退出码 0，无输出"""
        assert main(["echo"]) == 0

        captured = capfd.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    @posix_only
    def test_echo_hello(self, capfd):
        assert main(["echo", "hello"]) == 0

        assert capfd.readouterr().out == "hello\n"

    @posix_only
    def test_false(self):
        assert main(["false", "ignored"]) == 1

    def test_delegated_exit_code(self, py):
        assert main([py("import sys; sys.exit(3)"), "x"]) == 3

    def test_invalid_command(self, capfd):
        assert main(["echo 'oops", "x"]) == 2

        assert "命令解析错误" in capfd.readouterr().err

    def test_command_not_found(self, capfd):
        assert main(["run-if-needed-no-such-command", "x"]) == 127

        assert "run-if-needed-no-such-command" in capfd.readouterr().err

    @posix_only
    def test_blank_command(self):
        """空白 command: 直接执行 parameter"""
        assert main(["", "true"]) == 0

    @posix_only
    def test_script_without_shebang(self, tmp_path: Path, capfd):
        """没有 #! 行的脚本按 shell 方式执行，不输出 traceback"""
        script = tmp_path / "script"
        script.write_text('echo ran "$1"\n')
        script.chmod(0o755)

        assert main([str(script), "x"]) == 0

        captured = capfd.readouterr()
        assert captured.out == "ran x\n"
        assert "Traceback" not in captured.err

    def test_spawn_failure_without_traceback(self, monkeypatch, capfd):
        """启动失败只输出一行错误"""

        def fail(argv, **kwargs):
            raise OSError(errno.E2BIG, "Argument list too long")

        monkeypatch.setattr(subprocess, "run", fail)

        assert main(["prog", "x"]) == 126

        err = capfd.readouterr().err
        assert "Argument list too long" in err
        assert "Traceback" not in err

    def test_config_cwd(self, tmp_path: Path, py):
        """通过 RunnerConfig 指定工作目录"""
        command = py("import pathlib, sys; pathlib.Path(sys.argv[1]).touch()")

        assert main([command, "created"], config=RunnerConfig(cwd=tmp_path)) == 0
        assert (tmp_path / "created").exists()

    def test_keyboard_interrupt(self, monkeypatch):
        """被中断返回 130"""

        def interrupted(self, argv):
            raise KeyboardInterrupt

        monkeypatch.setattr("run_if_needed.cli.ConditionalRunner.run", interrupted)

        assert main(["echo", "x"]) == 130

    def test_defaults_to_sys_argv(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["run-if-needed", "echo"])

        assert main() == 0


class TestModuleEntry:
    """测试 python -m run_if_needed"""

    def _run(self, *args: str) -> subprocess.CompletedProcess:
        env = {**os.environ}
        env["PYTHONPATH"] = os.pathsep.join(
            p for p in (str(SRC_DIR), env.get("PYTHONPATH")) if p
        )
        return subprocess.run(
            [sys.executable, "-m", "run_if_needed", *args],
            capture_output=True,
            text=True,
            env=env,
        )

    def test_no_arguments(self):
        result = self._run()

        assert result.returncode == 1
        assert "Usage" in result.stderr

    def test_command_only(self):
        result = self._run("echo")

        assert result.returncode == 0
        assert result.stdout == ""

    def test_propagates_exit_code(self, py):
        result = self._run(py("import sys; print(sys.argv[1]); sys.exit(4)"), "hello")

        assert result.returncode == 4
        assert result.stdout.strip() == "hello"
