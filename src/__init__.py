"""
CinemaMode - Fournisseur d'intros pour serveur média Jellyfin.

Ce package décide, avant la lecture d'un élément, s'il faut jouer des intros
(bandes-annonces, pré-rolls) et délègue leur sélection à l'hôte.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports)
- services/ : Couche application (fournisseur d'intros)
- adapters/ : Couche infrastructure (CLI, client Jellyfin)
"""
