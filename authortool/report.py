"""Per-invocation summary of what an operation changed."""
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class Report:
    """Additions and removals applied or skipped during one command.

    Created empty when the command starts, filled in by AuthorManager,
    rendered once by the CLI and then discarded.
    """
    added: List[str] = field(default_factory=list)
    not_added: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    not_removed: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.added or self.not_added or self.removed or self.not_removed)

    def get_summary(self) -> Dict:
        """Get counts per category."""
        return {
            'added': len(self.added),
            'not_added': len(self.not_added),
            'removed': len(self.removed),
            'not_removed': len(self.not_removed),
        }

    def to_text(self) -> str:
        """Render as one line per entry (empty string for an empty report)."""
        lines = []
        for login in self.added:
            lines.append(f"[+] Added {login}")
        for login in self.not_added:
            lines.append(f"[=] Already listed: {login}")
        for login in self.removed:
            lines.append(f"[-] Removed {login}")
        for login in self.not_removed:
            lines.append(f"[!] Not listed: {login}")
        return "\n".join(lines)
