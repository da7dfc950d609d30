from __future__ import annotations

import socket
from pathlib import Path
from textwrap import dedent

import pytest
from hypothesis import settings

from catppuccin_portlist.core.context import RunContext

_ALLOWED_MARKERS = {"unit", "integration"}

settings.register_profile("portlist", deadline=None, max_examples=75)
settings.load_profile("portlist")

CATEGORIES_YML = dedent(
    """\
    - key: code_editor
      name: Code Editors
      emoji: "📝"
    - key: terminal
      name: Terminals
      emoji: "🖥️"
    - key: game
      name: Games
      emoji: "🎮"
    - key: social
      name: Social Networking
      emoji: "💬"
    """
)

PORTS_YML = dedent(
    """\
    ports:
      vim:
        name: Vim
        categories: [code_editor]
        platform: [linux, macos]
        readme: extra.md
      alacritty:
        name: Alacritty
        categories: [terminal]
      jetbrains:
        name: JetBrains
        categories: [code_editor]
        supports:
          pycharm:
            name: PyCharm
          idea:
            name: IntelliJ IDEA
      jetbrains-icons:
        name: JetBrains Icons
        categories: [code_editor]
        alias: jetbrains
      kitty:
        name: kitty
        categories: [terminal]
        url: https://github.com/kovidgoyal/kitty-themes
    showcases:
      - title: Catppuccin Website
        link: https://catppuccin.com
        description: The official website.
    """
)

USERSTYLES_YML = dedent(
    """\
    collaborators: []
    userstyles:
      github:
        name: GitHub
        categories: [social, code_editor]
        readme:
          app-link: https://github.com
      reddit:
        name: Reddit
        categories: [social]
    """
)

README_MD = dedent(
    """\
    # Catppuccin

    ## Ports

    <!-- AUTOGEN:PORTLIST START -->
    <!-- AUTOGEN:PORTLIST END -->

    ## Showcase

    <!-- AUTOGEN:SHOWCASE START -->
    <!-- AUTOGEN:SHOWCASE END -->
    """
)


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def no_network_for_unit(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> None:
    if request.node.get_closest_marker("integration"):
        return

    def _blocked(*_args: object, **_kwargs: object) -> socket.socket:
        raise RuntimeError("network disabled in unit tests")

    def _blocked_connect(*_args: object, **_kwargs: object) -> None:
        raise RuntimeError("network disabled in unit tests")

    monkeypatch.setattr(socket, "create_connection", _blocked)
    monkeypatch.setattr(socket.socket, "connect", _blocked_connect)


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    repo = tmp_path / "repo"
    (repo / "resources").mkdir(parents=True)
    (repo / "resources/ports.yml").write_text(PORTS_YML, encoding="utf-8")
    (repo / "resources/categories.yml").write_text(CATEGORIES_YML, encoding="utf-8")
    (repo / "userstyles.yml").write_text(USERSTYLES_YML, encoding="utf-8")
    (repo / "README.md").write_text(README_MD, encoding="utf-8")
    return repo


@pytest.fixture
def ctx(repo_root: Path) -> RunContext:
    return RunContext.from_args(
        repo_root=str(repo_root),
        run_id="pytest-run",
        userstyles_file="userstyles.yml",
        network_mode="forbid",
    )
