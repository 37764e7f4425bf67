"""Interface ligne de commande CinemaMode (Typer + Rich)."""
