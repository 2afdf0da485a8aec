import pytest

#: 2014-05-13T16:53:20Z
EPOCH = 1400000000


@pytest.fixture(scope="function")
def coreos_setup(monkeypatch):
    """Configure coreos from `env` with the clock fixed at `now`"""

    def res(env=None, now=None, tz=None):
        from pykern import pkconfig
        import coreos
        import coreos.date_codec

        for k in ("COREOS_EPOCH", "COREOS_VERSION", "TZ"):
            monkeypatch.delenv(k, raising=False)
        if tz is not None:
            monkeypatch.setenv("TZ", tz)
        e = {"COREOS_EPOCH": str(EPOCH)}
        e.update(env or {})
        pkconfig.reset_state_for_testing(add_to_environ=e)
        monkeypatch.setattr(coreos, "_cfg", None)
        if now is not None:
            monkeypatch.setattr(coreos.date_codec, "now", lambda: now)
        return coreos

    return res
