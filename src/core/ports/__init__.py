"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports hôte : Contrats vers le serveur média
- ILibraryManager : Accès en lecture à la bibliothèque (dossiers virtuels, éléments)
- IIntroManager : Sélection effective des intros

Port exposé : Contrat attendu par l'hôte
- IIntroProvider : Fournisseur d'intros
"""

from src.core.ports.host import IIntroManager, ILibraryManager
from src.core.ports.intro_provider import IIntroProvider

__all__ = [
    # Hôte
    "ILibraryManager",
    "IIntroManager",
    # Exposé
    "IIntroProvider",
]
