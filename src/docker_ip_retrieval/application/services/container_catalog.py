"""
Container catalog

Maps display names to container ids for the interactive selection.
"""
from typing import Dict, List, Sequence

from docker_ip_retrieval.domain.entities.container import ContainerRef
from docker_ip_retrieval.infrastructure.logging import get_logger
from docker_ip_retrieval.shared.errors import PromptFailureError

logger = get_logger(__name__)

ALL_CHOICE = "All"


class ContainerCatalog:
    """
    Name -> id mapping built from one container listing

    Display names are not unique. When two containers share a name the one
    listed later wins, and the earlier one can only be reached through
    "All".
    """

    def __init__(self, refs: Sequence[ContainerRef]):
        self._refs = list(refs)
        self._by_name: Dict[str, ContainerRef] = {}
        for ref in self._refs:
            previous = self._by_name.get(ref.name)
            if previous is not None:
                logger.debug(
                    "Duplicate container name, keeping the later container",
                    name=ref.name,
                    shadowed_id=previous.id,
                    kept_id=ref.id,
                )
            self._by_name[ref.name] = ref

    @classmethod
    def from_refs(cls, refs: Sequence[ContainerRef]) -> "ContainerCatalog":
        return cls(refs)

    def __len__(self) -> int:
        return len(self._refs)

    @property
    def refs(self) -> List[ContainerRef]:
        return list(self._refs)

    def name_to_id(self) -> Dict[str, str]:
        return {name: ref.id for name, ref in self._by_name.items()}

    def choices(self) -> List[str]:
        """"All" followed by every selectable name"""
        return [ALL_CHOICE, *self._by_name.keys()]

    def targets(self, selection: str) -> List[ContainerRef]:
        """
        Containers to resolve for a prompt answer

        Raises:
            PromptFailureError: the answer is neither "All" nor a known name
        """
        if selection == ALL_CHOICE:
            return self.refs
        ref = self._by_name.get(selection)
        if ref is None:
            raise PromptFailureError(
                f"Unknown container: {selection}",
                details={"choices": self.choices()},
            )
        return [ref]
