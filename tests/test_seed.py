"""Tests for roster seeding from YAML."""

import pytest
from sqlmodel import select

from volley_stats.db.models.players import Player
from volley_stats.db.seed import DEFAULT_SEED_PATH, load_seed_yaml, seed_all, seed_players


def test_bundled_roster_loads(db_session):
    seed_all(db_session, DEFAULT_SEED_PATH)

    names = [p.name for p in db_session.exec(select(Player).order_by(Player.id)).all()]
    assert names[:2] == ["Ana", "Bruna"]
    assert len(names) == 6


def test_default_seed_path_does_not_depend_on_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert DEFAULT_SEED_PATH.is_absolute()
    assert load_seed_yaml(DEFAULT_SEED_PATH)["players"]


def test_seeding_is_idempotent(db_session):
    data = {"players": [{"name": "Ana", "jersey_number": 7}]}

    assert seed_players(db_session, data) == 1
    assert seed_players(db_session, data) == 0


def test_invalid_player_is_rejected(db_session):
    with pytest.raises(ValueError, match="index 1"):
        seed_players(db_session, {"players": [{"name": "Ana", "jersey_number": 7}, {"name": "", "jersey_number": 2}]})

    assert db_session.exec(select(Player)).first() is None


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_seed_yaml(tmp_path / "nope.yaml")


def test_root_must_be_a_mapping(tmp_path):
    path = tmp_path / "roster.yaml"
    path.write_text("- Ana\n- Bruna\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_seed_yaml(path)
