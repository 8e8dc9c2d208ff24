import pytest

from release_bumper import resolver
from release_bumper.errors import ResolutionError
from release_bumper.resolver import ResolutionContext, default_version, resolve_next_version
from release_bumper.versions import BumpKind, ReleaseVersion


def resolve(tags, kind="patch", explicit=None, prefix="", suffix=""):
    context = ResolutionContext.build(
        tags,
        prefix=prefix,
        suffix=suffix,
        bump_kind=BumpKind.from_text(kind),
        explicit_start=ReleaseVersion.parse(explicit) if explicit else None,
    )
    return resolve_next_version(context)


def test_no_releases_patch_starts_at_default():
    resolution = resolve([], "patch")
    assert str(resolution.version) == "0.0.1"
    assert resolution.tag == "0.0.1"
    assert resolution.reason == resolver.DEFAULT
    assert resolution.base is None


@pytest.mark.parametrize("kind, expected", [("major", "1.0.0"), ("minor", "0.1.0"), ("patch", "0.0.1")])
def test_default_versions(kind, expected):
    assert str(default_version(BumpKind(kind))) == expected


def test_default_version_is_wrapped_in_prefix_and_suffix():
    resolution = resolve(["nightly", "docs"], "minor", prefix="app-", suffix="-x86")
    assert str(resolution.version) == "0.1.0"
    assert resolution.tag == "app-0.1.0-x86"


def test_latest_release_minor_bump():
    resolution = resolve(["v1.2.3"], "minor")
    assert str(resolution.version) == "1.3.0"
    assert resolution.tag == "1.3.0"
    assert resolution.reason == resolver.LATEST_BUMPED
    assert str(resolution.base) == "1.2.3"


def test_prefix_and_suffix_pattern():
    resolution = resolve(["cuda_1.3.0-beta"], "patch", prefix="cuda_", suffix="-beta")
    assert str(resolution.base) == "1.3.0"
    assert str(resolution.version) == "1.3.1"
    assert resolution.tag == "cuda_1.3.1-beta"


def test_explicit_version_already_released_is_bumped_past_collisions():
    resolution = resolve(["2.0.0", "2.0.1"], "patch", explicit="2.0.0")
    assert str(resolution.version) == "2.0.2"
    assert resolution.reason == resolver.EXPLICIT_BUMPED
    assert resolution.collisions == ("2.0.1",)


def test_patch_bump_advances_pre_release_counter():
    assert str(resolve(["1.0.0alpha1"], "patch").version) == "1.0.0alpha2"


def test_unused_explicit_version_is_taken_as_is():
    resolution = resolve(["v1.4.0", "v1.3.0"], "major", explicit="1.9.0")
    assert str(resolution.version) == "1.9.0"
    assert resolution.reason == resolver.EXPLICIT_UNUSED
    assert resolution.collisions == ()


def test_explicit_version_leading_v_is_not_restored():
    resolution = resolve([], "patch", explicit="v3.0.0", prefix="")
    assert resolution.tag == "3.0.0"


def test_newest_matching_release_wins_over_higher_older_one():
    resolution = resolve(["api-v0.9.0", "web-1.0.0", "1.4.2", "2.0.0"], "patch")
    assert str(resolution.version) == "1.4.3"


def test_unrelated_tags_are_ignored():
    resolution = resolve(["latest", "gpu-1.0.0", "0.3.0"], "minor")
    assert str(resolution.version) == "0.4.0"


def test_collision_loop_walks_a_dense_history():
    tags = [f"1.0.{patch}" for patch in range(5, 0, -1)] + ["1.0.0"]
    resolution = resolve(tags, "patch", explicit="1.0.0")
    assert str(resolution.version) == "1.0.6"
    assert resolution.tag not in tags
    assert resolution.collisions == ("1.0.1", "1.0.2", "1.0.3", "1.0.4", "1.0.5")


def test_collision_loop_with_suffix_counter():
    tags = ["1.0.0rc1", "1.0.0rc3", "1.0.0rc2"]
    resolution = resolve(tags, "patch")
    # newest listed is rc1, bumped to rc2 then past rc3
    assert str(resolution.version) == "1.0.0rc4"


def test_resolution_is_deterministic():
    tags = ["v2.1.0", "2.0.0", "2.1.0", "garbage"]
    first = resolve(tags, "minor", explicit="2.0.0")
    second = resolve(list(tags), "minor", explicit="2.0.0")
    assert first == second
    assert str(first.version) == "2.2.0"


def test_collision_limit_guards_against_non_increasing_bumps(monkeypatch):
    monkeypatch.setattr(resolver, "bump", lambda version, kind: version)
    with pytest.raises(ResolutionError):
        resolve(["1.0.0", "1.0.1"], "patch", explicit="1.0.1")
