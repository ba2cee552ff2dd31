"""
Pagination par curseur sur une collection de lancements.

Le curseur est le numero de vol du dernier element de la page precedente.
La pagination se degrade toujours en un resultat valide : un curseur
inconnu repart du debut de la collection au lieu de lever une erreur.
"""

from typing import Optional, Sequence

from spacetrips.core.entities.launch import Launch
from spacetrips.core.value_objects.results import LaunchPage


def paginate(
    launches: Sequence[Launch],
    cursor: Optional[str] = None,
    page_size: int = 20,
) -> LaunchPage:
    """
    Decoupe une page de lancements apres le curseur donne.

    Les lancements sont ordonnes par numero de vol croissant avant decoupage.

    Args:
        launches: Collection complete des lancements
        cursor: Curseur de la page precedente (None pour commencer au debut)
        page_size: Nombre maximum de lancements dans la page

    Returns:
        LaunchPage avec les lancements, le nouveau curseur et has_more
    """
    ordered = sorted(launches, key=lambda launch: launch.id)

    start = 0
    if cursor:
        for index, launch in enumerate(ordered):
            if launch.cursor == cursor:
                start = index + 1
                break

    if page_size < 1:
        return LaunchPage(has_more=start < len(ordered))

    page = tuple(ordered[start:start + page_size])
    return LaunchPage(
        launches=page,
        cursor=page[-1].cursor if page else None,
        has_more=start + len(page) < len(ordered),
    )
