import pytest

from hmac_token import Algorithm, SignError, SignErrorReason, TokenCodec, TokenConfig, TokenError, TokenErrorReason
from hmac_token.utils.time import fixed_clock

NOW = 1_700_000_000_000


def test_codec_round_trip_with_defaults() -> None:
    codec = TokenCodec("unit-secret")
    token = codec.sign({"userId": 1})
    assert codec.verify(token) == {"userId": 1}
    assert codec.verify(token, complete=True).header.expire_date == -1


def test_codec_applies_ttl_from_clock() -> None:
    codec = TokenCodec("unit-secret", config=TokenConfig(algorithm="HS384", ttl_ms=30_000), clock=fixed_clock(NOW))
    decoded = codec.verify(codec.sign({"userId": 1}), complete=True)
    assert decoded.header.alg is Algorithm.HS384
    assert decoded.header.expire_date == NOW + 30_000


def test_codec_expiry_and_grace_period() -> None:
    issuer = TokenCodec("unit-secret", config=TokenConfig(ttl_ms=1_000), clock=fixed_clock(NOW))
    token = issuer.sign({"userId": 1})

    later = fixed_clock(NOW + 1_500)
    with pytest.raises(TokenError) as info:
        TokenCodec("unit-secret", clock=later).verify(token)
    assert info.value.reason is TokenErrorReason.EXPIRED

    lenient = TokenCodec("unit-secret", config=TokenConfig(max_age_ms=500), clock=later)
    assert lenient.verify(token) == {"userId": 1}


def test_codec_explicit_expire_date_wins() -> None:
    codec = TokenCodec("unit-secret", config=TokenConfig(ttl_ms=1_000), clock=fixed_clock(NOW))
    token = codec.sign({"userId": 1}, expire_date=-1)
    assert codec.verify(token, complete=True).header.never_expires


def test_codec_repr_hides_secret() -> None:
    assert "unit-secret" not in repr(TokenCodec("unit-secret"))


def test_config_rejects_unknown_algorithm() -> None:
    with pytest.raises(ValueError):
        TokenConfig(algorithm="HS1")


def test_config_rejects_negative_durations() -> None:
    with pytest.raises(ValueError):
        TokenConfig(ttl_ms=-1)
    with pytest.raises(ValueError):
        TokenConfig(max_age_ms=-5)


def test_config_from_env() -> None:
    env = {
        "HMAC_TOKEN_ALGORITHM": "HS512",
        "HMAC_TOKEN_TTL_MS": "60000",
        "HMAC_TOKEN_MAX_AGE_MS": " 250 ",
        "HMAC_TOKEN_IGNORE_EXPIRATION": "yes",
    }
    config = TokenConfig.from_env(environ=env)
    assert config == TokenConfig(algorithm=Algorithm.HS512, ttl_ms=60_000, max_age_ms=250, ignore_expiration=True)


def test_config_from_env_defaults_when_unset() -> None:
    assert TokenConfig.from_env(environ={}) == TokenConfig()


def test_config_from_env_rejects_bad_values() -> None:
    with pytest.raises(ValueError):
        TokenConfig.from_env(environ={"HMAC_TOKEN_TTL_MS": "soon"})
    with pytest.raises(ValueError):
        TokenConfig.from_env(environ={"HMAC_TOKEN_IGNORE_EXPIRATION": "maybe"})


def test_codec_from_env(monkeypatch) -> None:
    monkeypatch.setenv("APP_SECRET", "env-secret")
    monkeypatch.setenv("APP_ALGORITHM", "HS384")
    codec = TokenCodec.from_env(prefix="APP_")
    assert codec.config.algorithm is Algorithm.HS384
    assert TokenCodec("env-secret").verify(codec.sign({"userId": 1})) == {"userId": 1}


def test_codec_without_secret_fails_on_use() -> None:
    codec = TokenCodec.from_env(environ={})
    with pytest.raises(SignError) as info:
        codec.sign({"userId": 1})
    assert info.value.reason is SignErrorReason.MISSING_SECRET
    with pytest.raises(TokenError) as info:
        codec.verify("a.b.c")
    assert info.value.reason is TokenErrorReason.MISSING_SECRET
