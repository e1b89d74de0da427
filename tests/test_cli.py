import json
from pathlib import Path
import pytest
from apps.cli import play, run


def test_play_solver_quiet(capsys):
    rc = play.main(["--solver", "random_consistent", "--seed", "1", "--secret", "cat",
                    "--max-guesses", "400", "--quiet"])
    assert rc == 0
    assert capsys.readouterr().out.startswith("WIN answer=cat")


def test_play_unknown_secret_exits():
    with pytest.raises(SystemExit, match="not in the dictionary"):
        play.main(["--solver", "random_consistent", "--secret", "zzzzz", "--quiet"])


def test_run_writes_outputs(tmp_path: Path):
    run.main(["--solvers", "random_consistent", "max_patterns", "--sample", "3",
              "--seed", "5", "--progress", "off", "--outdir", str(tmp_path)])
    for sid in ("random_consistent", "max_patterns"):
        manifests = list((tmp_path / sid).glob("run_*_manifest.json"))
        assert len(manifests) == 1
        m = json.loads(manifests[0].read_text(encoding="utf-8"))
        assert m["solver_id"] == sid and m["num_cases"] == 3
        assert m["dictionary"]["passed"] is True
        assert len(list((tmp_path / sid).glob("run_*.csv"))) == 1


@pytest.mark.parametrize("max_guesses", ["0", "-2"])
def test_run_rejects_non_positive_max_guesses(tmp_path: Path, max_guesses):
    outdir = tmp_path / "reports"
    with pytest.raises(SystemExit, match="--max-guesses must be >= 1"):
        run.main(["--max-guesses", max_guesses, "--sample", "1", "--progress", "off",
                  "--outdir", str(outdir)])
    assert not outdir.exists()


@pytest.mark.parametrize("sample", ["0", "-1"])
def test_run_rejects_non_positive_sample(tmp_path: Path, sample):
    with pytest.raises(SystemExit, match="--sample must be >= 1"):
        run.main(["--sample", sample, "--progress", "off", "--outdir", str(tmp_path)])
