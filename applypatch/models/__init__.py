from .hunks import AddFile, DeleteFile, EditChunk, Operation, UpdateFile

__all__ = ["AddFile", "DeleteFile", "EditChunk", "Operation", "UpdateFile"]
