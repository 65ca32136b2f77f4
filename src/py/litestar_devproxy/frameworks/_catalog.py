"""Framework definitions used by the ``package.json`` detector."""

from dataclasses import dataclass, field
from enum import Enum


def _str_list_factory() -> list[str]:
    return []


def _str_dict_factory() -> dict[str, str]:
    return {}


class FrameworkName(str, Enum):
    """Framework identifiers accepted by the ``framework`` option."""

    ANGULAR = "angular"
    ASTRO = "astro"
    CREATE_REACT_APP = "create-react-app"
    ELEVENTY = "eleventy"
    GATSBY = "gatsby"
    NEXT = "next"
    NUXT = "nuxt"
    SVELTEKIT = "sveltekit"
    VITE = "vite"


@dataclass
class FrameworkDefinition:
    """How to recognize and run a frontend framework.

    Attributes:
        name: Framework identifier.
        title: Display name shown in listings.
        dependencies: npm packages; the framework matches when any is declared.
        binaries: Executables whose use in a ``package.json`` script marks it as a dev script.
        default_command: Command used when no matching script exists.
        port: Port the framework dev server listens on by default.
        build_directory: Directory the production build is written to.
        static_assets_directory: Directory of static assets served during development.
        env: Environment variables passed to the dev command.
    """

    name: FrameworkName
    title: str
    dependencies: list[str] = field(default_factory=_str_list_factory)
    binaries: list[str] = field(default_factory=_str_list_factory)
    default_command: str = ""
    port: int = 3000
    build_directory: str = "dist"
    static_assets_directory: "str | None" = None
    env: dict[str, str] = field(default_factory=_str_dict_factory)


FRAMEWORKS: dict[FrameworkName, FrameworkDefinition] = {
    FrameworkName.ANGULAR: FrameworkDefinition(
        name=FrameworkName.ANGULAR,
        title="Angular",
        dependencies=["@angular/cli"],
        binaries=["ng"],
        default_command="npx ng serve",
        port=4200,
        build_directory="dist",
    ),
    FrameworkName.ASTRO: FrameworkDefinition(
        name=FrameworkName.ASTRO,
        title="Astro",
        dependencies=["astro"],
        binaries=["astro"],
        default_command="npx astro dev",
        port=4321,
        build_directory="dist",
    ),
    FrameworkName.CREATE_REACT_APP: FrameworkDefinition(
        name=FrameworkName.CREATE_REACT_APP,
        title="Create React App",
        dependencies=["react-scripts"],
        binaries=["react-scripts"],
        default_command="npx react-scripts start",
        port=3000,
        build_directory="build",
        static_assets_directory="public",
        env={"BROWSER": "none", "PORT": "3000"},
    ),
    FrameworkName.ELEVENTY: FrameworkDefinition(
        name=FrameworkName.ELEVENTY,
        title="Eleventy",
        dependencies=["@11ty/eleventy"],
        binaries=["eleventy"],
        default_command="npx @11ty/eleventy --serve",
        port=8080,
        build_directory="_site",
    ),
    FrameworkName.GATSBY: FrameworkDefinition(
        name=FrameworkName.GATSBY,
        title="Gatsby",
        dependencies=["gatsby"],
        binaries=["gatsby"],
        default_command="npx gatsby develop",
        port=8000,
        build_directory="public",
        env={"GATSBY_LOGGER": "yurnalist"},
    ),
    FrameworkName.NEXT: FrameworkDefinition(
        name=FrameworkName.NEXT,
        title="Next.js",
        dependencies=["next"],
        binaries=["next"],
        default_command="npx next dev",
        port=3000,
        build_directory="out",
        static_assets_directory="public",
    ),
    FrameworkName.NUXT: FrameworkDefinition(
        name=FrameworkName.NUXT,
        title="Nuxt",
        dependencies=["nuxt", "nuxt3"],
        binaries=["nuxt", "nuxi"],
        default_command="npx nuxi dev",
        port=3000,
        build_directory=".output/public",
    ),
    FrameworkName.SVELTEKIT: FrameworkDefinition(
        name=FrameworkName.SVELTEKIT,
        title="SvelteKit",
        dependencies=["@sveltejs/kit"],
        binaries=["svelte-kit", "vite"],
        default_command="npx vite dev",
        port=5173,
        build_directory="build",
        static_assets_directory="static",
    ),
    FrameworkName.VITE: FrameworkDefinition(
        name=FrameworkName.VITE,
        title="Vite",
        dependencies=["vite"],
        binaries=["vite"],
        default_command="npx vite",
        port=5173,
        build_directory="dist",
    ),
}

