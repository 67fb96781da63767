import bleach
from rest_framework import serializers


def clean_text(v):
    return bleach.clean((v or '').strip(), tags=[], strip=True)


class DocumentDateField(serializers.DateField):
    """Date field that also accepts a full ISO datetime and keeps its date part."""

    def to_internal_value(self, value):
        if isinstance(value, str) and 'T' in value:
            value = value.split('T', 1)[0]
        return super().to_internal_value(value)


class DocumentSerializer(serializers.ModelSerializer):
    """Base serializer for stored documents.

    The internal id is exposed as ``_id`` and is never writable.  Fields
    listed in ``Meta.text_fields`` are free text and have markup stripped.
    """
    _id = serializers.CharField(source='id', read_only=True)

    def validate(self, attrs):
        for field in getattr(self.Meta, 'text_fields', ()):
            if field in attrs:
                attrs[field] = clean_text(attrs[field])
        return attrs
