"""
Per-language compilation profiles.

Choosing how to compile for a language is a data lookup, not behaviour: each
:class:`~protoweld.config.models.Language` maps to one immutable
:class:`LanguageProfile` naming the tools that must be installed, how to
probe them, which protoc output flags to emit, whether a gRPC plugin path
is required, and whether the generated files need post-processing.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Mapping

from protoweld.config.models import Language


PROTOC = "protoc"

PostProcessor = Literal["rust-modules"]


@dataclass(frozen=True)
class LanguageProfile:
    """Everything protoweld needs to know to compile for one language.

    Attributes:
        language: The language this profile describes.
        dependencies: Executables that must be installed, checked in order.
        probe_flags: Flag proving each dependency is installed, index-aligned
            with ``dependencies``; an empty flag probes with no arguments.
        message_out_flag: protoc flag receiving the message output directory.
        service_out_flag: protoc flag receiving the service output directory.
        plugin_name: gRPC plugin whose path the project must supply, if any.
        post_processor: Post-processing pipeline to run after compilation.
    """

    language: Language
    dependencies: tuple[str, ...]
    probe_flags: tuple[str, ...]
    message_out_flag: str
    service_out_flag: str
    plugin_name: str | None = None
    post_processor: PostProcessor | None = None

    def __post_init__(self) -> None:
        if len(self.dependencies) != len(self.probe_flags):
            raise ValueError(
                f"{self.language.value}: {len(self.dependencies)} dependencies but "
                f"{len(self.probe_flags)} probe flags"
            )

    @property
    def reserved_flags(self) -> frozenset[str]:
        """Flags protoweld emits itself and users may not override."""
        return frozenset((self.message_out_flag, self.service_out_flag))


GO_PROFILE = LanguageProfile(
    language=Language.GO,
    dependencies=(PROTOC, "go", "protoc-gen-go", "protoc-gen-go-grpc"),
    probe_flags=("--version", "version", "--version", "--version"),
    message_out_flag="--go_out",
    service_out_flag="--go-grpc_out",
)

DOTNET_PROFILE = LanguageProfile(
    language=Language.DOTNET,
    dependencies=(PROTOC, "dotnet"),
    probe_flags=("--version", "--version"),
    message_out_flag="--csharp_out",
    service_out_flag="--grpc_out",
    plugin_name="grpc_csharp_plugin",
)

# protoc-gen-tonic and protoc-gen-prost have no version flag
RUST_PROFILE = LanguageProfile(
    language=Language.RUST,
    dependencies=(PROTOC, "protoc-gen-tonic", "protoc-gen-prost"),
    probe_flags=("--version", "", ""),
    message_out_flag="--prost_out",
    service_out_flag="--tonic_out",
    post_processor="rust-modules",
)

LANGUAGE_PROFILES: Mapping[Language, LanguageProfile] = MappingProxyType(
    {profile.language: profile for profile in (GO_PROFILE, DOTNET_PROFILE, RUST_PROFILE)}
)


def profile_for(language: Language) -> LanguageProfile:
    """Return the compilation profile for ``language``."""
    return LANGUAGE_PROFILES[language]


__all__ = [
    "DOTNET_PROFILE",
    "GO_PROFILE",
    "LANGUAGE_PROFILES",
    "LanguageProfile",
    "PROTOC",
    "PostProcessor",
    "RUST_PROFILE",
    "profile_for",
]
