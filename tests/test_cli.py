"""
Tests for the run_nth_prime command line.
"""

import pytest

import run_nth_prime
from nthprime.errors import InvariantError


class TestSuccess:
    """Exit code 0 and the result lines."""

    def test_prints_result(self, capsys):
        assert run_nth_prime.main(['1000', '--quiet']) == 0
        out = capsys.readouterr().out
        assert "Prime #1000 = 7919" in out
        assert "primes calculated)" in out
        assert "Counting" not in out

    def test_verbose_progress(self, capsys):
        assert run_nth_prime.main(['6', '--pieces', '3']) == 0
        out = capsys.readouterr().out
        assert "+ Will break counting into 3 pieces..." in out
        assert "Prime #6 = 13" in out

    def test_config_file(self, tmp_path, capsys):
        config = tmp_path / 'custom.yaml'
        config.write_text("pieces: 4\nsearch_pieces: 2\nverbose: false\n")
        assert run_nth_prime.main(['100000', '--config', str(config)]) == 0
        out = capsys.readouterr().out
        assert out.splitlines()[0] == "Prime #100000 = 1299709"

    def test_workers_flag(self, capsys):
        assert run_nth_prime.main(['1000', '--workers', '2', '--quiet']) == 0
        assert "Prime #1000 = 7919" in capsys.readouterr().out


class TestUsageErrors:
    """Usage errors print to stdout and exit with code 1."""

    @pytest.mark.parametrize("argv", [[], ['1', '2'], ['abc'], ['0'], ['1.5']])
    def test_bad_arguments(self, argv, capsys):
        with pytest.raises(SystemExit) as exc:
            run_nth_prime.main(argv)
        assert exc.value.code == 1
        assert "usage:" in capsys.readouterr().out

    def test_missing_config_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            run_nth_prime.main(['10', '--config', str(tmp_path / 'missing.yaml')])
        assert exc.value.code == 1

    def test_ordinal_too_large(self, capsys):
        with pytest.raises(SystemExit) as exc:
            run_nth_prime.main([str(10**18), '--quiet'])
        assert exc.value.code == 1


class TestInternalErrors:
    """Invariant violations abort with a diagnostic and exit code 2."""

    def test_invariant_error(self, monkeypatch, capsys):
        def broken(*args, **kwargs):
            raise InvariantError("result is zero!")

        monkeypatch.setattr(run_nth_prime, 'nth_prime', broken)
        assert run_nth_prime.main(['10', '--quiet']) == 2
        assert "Assertion failed: result is zero!" in capsys.readouterr().out


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
