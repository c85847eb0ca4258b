from integrase.presentation.dependencies.auth import is_authorized

__all__ = ["is_authorized"]
