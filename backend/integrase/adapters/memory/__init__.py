from integrase.adapters.memory.memory_adapter import MemoryListAdapter

__all__ = ["MemoryListAdapter"]
