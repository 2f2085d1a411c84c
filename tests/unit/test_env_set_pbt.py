"""Property-based tests for EnvSet.

**Precedence**: for any key, the override tier wins over the OS environment,
which wins over the file tier, which wins over the caller's default.
**Isolation**: clones never leak override/file changes back to their parent,
but share the OS environment tier.
"""

from hypothesis import given, strategies as st, settings

from envtier.config import EnvtierSettings
from envtier.env_set import EnvSet
from envtier.env_file import parse_env_lines
from envtier.errors import NotSetError
from envtier.services.runtime_env_service import MemoryEnvService

keys = st.text(
    alphabet=st.characters(whitelist_categories=("Lu", "Nd"), whitelist_characters="_"),
    min_size=1,
    max_size=20,
)
values = st.text(
    alphabet=st.characters(
        whitelist_categories=("L", "N", "P", "Zs"),
        whitelist_characters="\t",
        blacklist_characters="=",
    ),
    min_size=1,
    max_size=30,
)
maybe_values = st.none() | values


def _env(memory_env: MemoryEnvService | None = None) -> EnvSet:
    if memory_env is None:
        memory_env = MemoryEnvService()
    return EnvSet(memory_env, settings=EnvtierSettings())


class TestPrecedenceProperties:
    """Property: lookup order is fixed."""

    @given(key=keys, override=maybe_values, os_value=maybe_values, file_value=maybe_values, default=values)
    @settings(max_examples=100)
    def test_property_first_tier_wins(self, key, override, os_value, file_value, default):
        memory_env = MemoryEnvService()
        env = _env(memory_env)
        if os_value is not None:
            memory_env.set(key, os_value)
        if file_value is not None:
            env.file_data = {key: file_value}
        if override is not None:
            env.set(key, override)

        if override is not None:
            assert env.string(key, default) == (override, True)
        elif os_value is not None:
            assert env.string(key, default) == (os_value.strip(" \n\t"), True)
        elif file_value is not None:
            assert env.string(key, default) == (file_value.strip(" \n\t"), True)
        else:
            assert env.string(key, default) == (default, False)

    @given(key=keys, value=values)
    @settings(max_examples=100)
    def test_property_local_set_round_trip(self, key, value):
        memory_env = MemoryEnvService()
        env = _env(memory_env)
        env.set(key, value)
        assert env.string(key, "") == (value, True)
        assert key not in memory_env

    @given(key=keys, value=values)
    @settings(max_examples=100)
    def test_property_unset_after_local_set(self, key, value):
        env = _env()
        env.set(key, value)
        env.unset(key)
        assert env.string(key, "d") == ("d", False)


class TestIntProperties:
    """Property: int64() returns exactly what was stored."""

    @given(key=keys, n=st.integers(min_value=-(2**63), max_value=2**63 - 1))
    @settings(max_examples=100)
    def test_property_int64_round_trip(self, key, n):
        env = _env()
        env.set(key, str(n))
        assert env.int64(key, 0) == (n, None)

    @given(key=keys, default=st.integers())
    @settings(max_examples=100)
    def test_property_missing_returns_default(self, key, default):
        value, err = _env().int(key, default)
        assert value == default
        assert isinstance(err, NotSetError)


class TestCloneProperties:
    """Property: clones are independent except for the OS tier."""

    @given(key=keys, parent_value=values, child_value=values)
    @settings(max_examples=100)
    def test_property_clone_isolation(self, key, parent_value, child_value):
        memory_env = MemoryEnvService()
        parent = _env(memory_env)
        parent.set(key, parent_value)
        before = parent.string(key, "")

        child = parent.clone()
        child.set(key, child_value)
        child.unset(key)

        assert parent.string(key, "") == before

    @given(key=keys, value=values)
    @settings(max_examples=100)
    def test_property_clone_shares_global_writes(self, key, value):
        memory_env = MemoryEnvService()
        parent = _env(memory_env)
        child = parent.clone()
        child.set(key, value, global_=True)
        assert memory_env.get(key) == value
        assert parent.string(key, "") == (value.strip(" \n\t"), True)


class TestFileParsingProperties:
    """Property: a well-formed line always yields its trimmed pair."""

    @given(key=keys, value=values)
    @settings(max_examples=100)
    def test_property_single_pair(self, key, value):
        data = parse_env_lines([f"{key}={value}\n"])
        trimmed_value = value.strip(' ,\t;#"')
        assert data == {key: trimmed_value}
