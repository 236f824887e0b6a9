import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple, Union


@dataclass(frozen=True)
class LiteralPattern:
    """
    Indicator that matches a directory containing an entry with an exact name.

    Attributes:
        name (str): The file or directory name to look for, e.g. ``Cargo.toml``.
    """

    name: str

    def matches(self, directory: Path) -> bool:
        return os.path.exists(directory / self.name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class SuffixPattern:
    """
    Indicator that matches a directory with at least one direct child whose
    name ends with a suffix, e.g. ``.csproj``.

    Attributes:
        suffix (str): The required ending of the child's name.
    """

    suffix: str

    def matches(self, directory: Path) -> bool:
        try:
            with os.scandir(directory) as entries:
                return any(entry.name.endswith(self.suffix) for entry in entries)
        except OSError:
            return False

    def __str__(self) -> str:
        return f"*{self.suffix}"


IndicatorPattern = Union[LiteralPattern, SuffixPattern]


def parse_pattern(text: str) -> IndicatorPattern:
    """
    Convert the shell-like notation used in rule tables into a pattern.

    A leading ``*`` marks a suffix wildcard; anything else is a literal name.

    Args:
        text (str): Pattern text such as ``"pom.xml"`` or ``"*.sln"``.

    Returns:
        IndicatorPattern: The parsed pattern.
    """
    if text.startswith("*"):
        suffix = text[1:]
        if not suffix:
            raise ValueError("Wildcard pattern needs a suffix after '*'")
        return SuffixPattern(suffix)
    if not text:
        raise ValueError("Indicator pattern cannot be empty")
    return LiteralPattern(text)


@dataclass(frozen=True)
class RuleSet:
    """
    Describes how to recognise one ecosystem's projects and what to remove from them.

    Attributes:
        command (str): Name of the CLI command that selects this rule set.
        label (str): Human readable ecosystem name used in output.
        indicators (Tuple[IndicatorPattern, ...]): Patterns marking a project root.
        targets (Tuple[str, ...]): Directory names removed from matched roots.
    """

    command: str
    label: str
    indicators: Tuple[IndicatorPattern, ...]
    targets: Tuple[str, ...]

    def __post_init__(self):
        if not self.indicators:
            raise ValueError(f"Rule set '{self.label}' has no indicator patterns")
        for target in self.targets:
            if not target or target in (".", "..") or "/" in target or os.sep in target:
                raise ValueError(f"Invalid target directory name '{target}' in rule set '{self.label}'")

    @classmethod
    def from_table(cls, command: str, label: str, indicators: List[str], targets: List[str]) -> "RuleSet":
        return cls(command, label, tuple(parse_pattern(p) for p in indicators), tuple(targets))

    def describe_targets(self) -> str:
        return ", ".join(f"{target}/" for target in self.targets)


RULE_TABLE = [
    {
        "command": "rust",
        "label": "Rust",
        "indicators": ["Cargo.toml"],
        "targets": ["target"],
    },
    {
        "command": "python",
        "label": "Python",
        "indicators": ["requirements.txt", "pyproject.toml", "setup.py", "Pipfile"],
        "targets": [".venv", "venv", "__pycache__", ".pytest_cache", ".mypy_cache"],
    },
    {
        "command": "js",
        "label": "JavaScript/TypeScript",
        "indicators": ["package.json"],
        "targets": ["node_modules", ".next", ".nuxt", ".cache", "dist", "build"],
    },
    {
        "command": "java",
        "label": "Java",
        "indicators": ["pom.xml", "build.gradle", "build.gradle.kts"],
        "targets": ["target", "build", ".gradle", ".classpath"],
    },
    {
        "command": "go",
        "label": "Go",
        "indicators": ["go.mod", "go.sum"],
        "targets": ["bin", "pkg", "__debug_bin"],
    },
    {
        "command": "dotnet",
        "label": ".NET",
        "indicators": ["*.csproj", "*.fsproj", "*.sln"],
        "targets": ["bin", "obj"],
    },
]

RULE_SETS: Dict[str, RuleSet] = {entry["command"]: RuleSet.from_table(**entry) for entry in RULE_TABLE}

ALL_COMMAND = "all"


def get_rule_sets(command: str) -> List[RuleSet]:
    """
    Resolve a CLI command name to the rule sets it applies.

    Args:
        command (str): An ecosystem command such as ``"rust"``, or ``"all"``.

    Returns:
        List[RuleSet]: The selected rule sets, in table order for ``"all"``.
    """
    if command == ALL_COMMAND:
        return list(RULE_SETS.values())
    if command not in RULE_SETS:
        raise KeyError(f"Unknown ecosystem '{command}'")
    return [RULE_SETS[command]]
