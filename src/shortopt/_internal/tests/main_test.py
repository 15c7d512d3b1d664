"""Tests for shortopt._internal.main."""
import io
import os
import shutil
import sys
import tempfile
import unittest
from unittest import mock

import pytest

from shortopt._internal import constants
from shortopt._internal import main


class ProgramNameTest(unittest.TestCase):
    """Tests for shortopt._internal.main.program_name."""

    def test_path(self):
        assert 'getopt' == main.program_name('/usr/local/bin/getopt')

    def test_extension(self):
        assert 'shortopt' == main.program_name('/opt/bin/shortopt.py')

    def test_missing(self):
        assert constants.PROGRAM_NAME == main.program_name(None)
        assert constants.PROGRAM_NAME == main.program_name('')

    def test_module(self):
        assert 'fallback' == main.program_name('/src/shortopt/__main__.py', 'fallback')


class MainTest(unittest.TestCase):
    """Tests for shortopt._internal.main.main."""

    def setUp(self):
        self.tempdir = tempfile.mkdtemp()
        patches = [
            mock.patch('sys.argv', ['/usr/bin/shortopt']),
            mock.patch('shortopt._internal.main.log.setup_logging'),
        ]
        for patch in patches:
            patch.start()
            self.addCleanup(patch.stop)
        self.mock_logger = self._patch('shortopt._internal.main.logger')

    def tearDown(self):
        shutil.rmtree(self.tempdir)

    def _patch(self, target):
        patcher = mock.patch(target)
        self.addCleanup(patcher.stop)
        return patcher.start()

    def _call(self, args):
        with mock.patch('sys.stdout', new_callable=io.StringIO) as stdout:
            status = main.main(args)
        return status, stdout.getvalue()

    def _error_messages(self):
        return [call[0][0] % call[0][1:] for call in self.mock_logger.error.call_args_list]

    def test_basic(self):
        status, out = self._call(['ab:c', '-a', '-bfoo', '-c', 'x', 'y'])
        assert constants.EXIT_OK == status
        assert "-a -b 'foo' -c -- 'x' 'y'\n" == out

    def test_cluster_and_separate_argument(self):
        status, out = self._call(['ab:', '-ab', "it's", 'rest'])
        assert constants.EXIT_OK == status
        assert "-a -b 'it'\\''s' -- 'rest'\n" == out

    def test_terminator(self):
        status, out = self._call(['a', '-a', '--', '-a'])
        assert constants.EXIT_OK == status
        assert "-a -- '-a'\n" == out

    def test_no_target_arguments(self):
        status, out = self._call(['a'])
        assert constants.EXIT_OK == status
        assert "--\n" == out

    def test_optional_argument(self):
        status, out = self._call(['o::', '-o', '-ofile'])
        assert constants.EXIT_OK == status
        assert "-o -o 'file' --\n" == out

    def test_shell_flag(self):
        status, out = self._call(['-s', 'rc', 'a:', '-a', "it's"])
        assert constants.EXIT_OK == status
        assert "-a 'it''s' --\n" == out

    def test_help(self):
        status, out = self._call(['-h', 'ignored'])
        assert constants.EXIT_OK == status
        assert out.startswith('Usage: shortopt [-h]')
        assert "(default 'shortopt')" in out

    def test_unknown_own_option(self):
        status, out = self._call(['-x', 'a'])
        assert constants.EXIT_INTERNAL_ERROR == status
        assert '' == out
        assert ["shortopt: unknown option -- 'x'"] == self._error_messages()

    def test_missing_own_argument(self):
        status, _ = self._call(['-s'])
        assert constants.EXIT_INTERNAL_ERROR == status
        assert ["shortopt: option requires an argument -- 's'"] == self._error_messages()

    def test_missing_optstring(self):
        status, _ = self._call(['-s', 'bash'])
        assert constants.EXIT_INTERNAL_ERROR == status
        assert ['shortopt: missing optstring argument'] == self._error_messages()

    def test_unknown_shell(self):
        status, _ = self._call(['-s', 'pwsh', 'a'])
        assert constants.EXIT_INTERNAL_ERROR == status
        assert ['shortopt: unknown shell type: pwsh'] == self._error_messages()

    def test_unknown_shell_before_help(self):
        status, out = self._call(["-s", "pwsh", "-h"])
        assert constants.EXIT_INTERNAL_ERROR == status
        assert "" == out
        assert ["shortopt: unknown shell type: pwsh"] == self._error_messages()

    def test_target_error(self):
        status, out = self._call(['-n', 'myscript', 'a', '-z'])
        assert constants.EXIT_EXTERNAL_ERROR == status
        assert '' == out
        assert ["myscript: unknown option -- 'z'"] == self._error_messages()

    def test_target_missing_argument(self):
        status, _ = self._call(['b:', '-b'])
        assert constants.EXIT_EXTERNAL_ERROR == status
        assert ["shortopt: option requires an argument -- 'b'"] == self._error_messages()

    def test_config_file(self):
        path = os.path.join(self.tempdir, 'cli.ini')
        with open(path, 'w') as f:
            f.write('name = fromfile\nshell = fish\nverbose = 1\n')
        status, out = self._call(['-c', path, 'a:z', '-a', "x'y", '-q'])
        assert constants.EXIT_EXTERNAL_ERROR == status
        assert ["fromfile: unknown option -- 'q'"] == self._error_messages()
        main.log.setup_logging.assert_called_with(1)

    def test_flags_override_config_file(self):
        path = os.path.join(self.tempdir, 'cli.ini')
        with open(path, 'w') as f:
            f.write('shell = fish\n')
        status, out = self._call(['-vv', '-c', path, '-s', 'rc', 'a:', '-a', "x'y"])
        assert constants.EXIT_OK == status
        assert "-a 'x''y' --\n" == out
        main.log.setup_logging.assert_called_with(2)

    def test_negative_verbose_in_config_file(self):
        path = os.path.join(self.tempdir, "cli.ini")
        with open(path, "w") as f:
            f.write("verbose = -3\n")
        status, out = self._call(["-c", path, "a", "-z"])
        assert constants.EXIT_INTERNAL_ERROR == status
        assert "" == out
        assert "verbose must not be negative" in self._error_messages()[0]

    def test_missing_config_file(self):
        status, _ = self._call(['-c', os.path.join(self.tempdir, 'absent.ini'), 'a'])
        assert constants.EXIT_INTERNAL_ERROR == status
        assert 'does not exist' in self._error_messages()[0]

    def test_default_config_files(self):
        path = os.path.join(self.tempdir, 'cli.ini')
        with open(path, 'w') as f:
            f.write('shell = csh\n')
        with mock.patch.dict(constants.CLI_DEFAULTS, config_files=[path]):
            status, out = self._call(['a:', '-a', 'x y'])
        assert constants.EXIT_OK == status
        assert "-a 'x'\\ 'y' --\n" == out

    def test_uses_sys_argv(self):
        with mock.patch('sys.argv', ['/bin/getopt', 'a', '-a', 'pos']):
            status, out = self._call(None)
        assert constants.EXIT_OK == status
        assert "-a -- 'pos'\n" == out


class ModuleMainTest(unittest.TestCase):
    """Tests for shortopt.__main__.main."""

    @mock.patch('shortopt._internal.main.main')
    def test_exit_status(self, mock_main):
        from shortopt import __main__
        mock_main.return_value = 1
        with pytest.raises(SystemExit) as exc_info:
            __main__.main()
        assert 1 == exc_info.value.code


if __name__ == "__main__":
    sys.exit(pytest.main(sys.argv[1:] + [__file__]))  # pragma: no cover
