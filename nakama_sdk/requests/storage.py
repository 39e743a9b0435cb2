"""Storage engine requests."""

from typing import Annotated, Any, Self

from nakama_sdk.models.storage import (
    DeleteStorageObjectId,
    ReadStorageObjectId,
    StorageObjectAcks,
    StorageObjectList,
    StorageObjects,
    WriteStorageObject,
)
from nakama_sdk.requests._base import PageRequest, PathId, Query, Request


class ReadStorageObjectsRequest(Request):
    """Read objects by (collection, key, user_id)."""

    method = "POST"
    path = "v2/storage"
    response_type = StorageObjects
    sends_body = True

    object_ids: list[ReadStorageObjectId]

    def __init__(self, *object_ids: ReadStorageObjectId, **data: Any) -> None:
        data.setdefault("object_ids", list(object_ids))
        super().__init__(**data)

    def with_object(self, collection: str, key: str, user_id: str | None = None) -> Self:
        self.object_ids = [
            *self.object_ids,
            ReadStorageObjectId(collection=collection, key=key, user_id=user_id),
        ]
        return self


class WriteStorageObjectsRequest(Request):
    method = "PUT"
    path = "v2/storage"
    response_type = StorageObjectAcks
    sends_body = True

    objects: list[WriteStorageObject]

    def __init__(self, *objects: WriteStorageObject, **data: Any) -> None:
        data.setdefault("objects", list(objects))
        super().__init__(**data)

    def with_object(self, obj: WriteStorageObject) -> Self:
        self.objects = [*self.objects, obj]
        return self


class DeleteStorageObjectsRequest(Request):
    method = "PUT"
    path = "v2/storage/delete"
    sends_body = True

    object_ids: list[DeleteStorageObjectId]

    def __init__(self, *object_ids: DeleteStorageObjectId, **data: Any) -> None:
        data.setdefault("object_ids", list(object_ids))
        super().__init__(**data)

    def with_object(self, collection: str, key: str, version: str | None = None) -> Self:
        self.object_ids = [
            *self.object_ids,
            DeleteStorageObjectId(collection=collection, key=key, version=version),
        ]
        return self


class StorageObjectsRequest(PageRequest):
    """List objects in a collection, optionally for a single user."""

    path = "v2/storage/{collection}"
    response_type = StorageObjectList

    collection: PathId
    user_id: Annotated[str | None, Query("userId")] = None

    def __init__(self, collection: str, **data: Any) -> None:
        super().__init__(collection=collection, **data)

    def with_user_id(self, user_id: str) -> Self:
        self.user_id = user_id
        return self
