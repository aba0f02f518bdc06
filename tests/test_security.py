from guardshift.security import check_password, default_rounds, hash_password


def test_hash_and_check():
    hashed = hash_password("guard123", rounds=4)
    assert hashed.startswith("$2b$04$")
    assert hashed != "guard123"
    assert check_password("guard123", hashed)
    assert not check_password("guard124", hashed)


def test_salts_differ():
    assert hash_password("admin123", rounds=4) != hash_password("admin123", rounds=4)


def test_rounds_from_env(monkeypatch):
    monkeypatch.delenv("BCRYPT_ROUNDS", raising=False)
    assert default_rounds() == 10
    monkeypatch.setenv("BCRYPT_ROUNDS", "5")
    assert default_rounds() == 5
    assert hash_password("x").startswith("$2b$05$")
