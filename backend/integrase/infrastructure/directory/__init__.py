from integrase.infrastructure.directory.client import DirectoryClient, patch_list

__all__ = ["DirectoryClient", "patch_list"]
