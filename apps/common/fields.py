import uuid
import base58
from django.db import models
from django.conf import settings


def generate_base58_id() -> str:
    """Base58 encoded UUIDv5 derived from PLATFORM_NAMESPACE and a random UUIDv4."""
    namespace = settings.PLATFORM_NAMESPACE
    if not isinstance(namespace, uuid.UUID):
        namespace = uuid.UUID(str(namespace))
    uuid_obj = uuid.uuid5(namespace, str(uuid.uuid4()))
    return base58.b58encode(uuid_obj.bytes).decode('ascii')


class Base58UUIDv5Field(models.CharField):
    """
    Primary key field holding a Base58 encoded UUIDv5.

    Ids are assigned on first save, so payouts and audit events get short,
    URL-safe identifiers that can be shown to staff and pasted into searches.
    """
    description = "A Base58 encoded UUIDv5 identifier."

    def __init__(self, *args, **kwargs):
        kwargs['max_length'] = 22
        kwargs['unique'] = True
        kwargs['editable'] = False
        super().__init__(*args, **kwargs)

    def generate_id(self):
        return generate_base58_id()

    def pre_save(self, model_instance, add):
        if add and not getattr(model_instance, self.attname):
            setattr(model_instance, self.attname, self.generate_id())
        return super().pre_save(model_instance, add)

    def deconstruct(self):
        name, path, args, kwargs = super().deconstruct()
        kwargs.pop('max_length', None)
        kwargs.pop('unique', None)
        kwargs.pop('editable', None)
        return name, path, args, kwargs
