"""Unit tests for the storage error kinds and their rendered messages."""

import pickle

import pytest

from objstore.storage import (
    ERROR_KINDS,
    APINotImplemented,
    BackendCorrupted,
    BackendError,
    BadDigest,
    BucketExists,
    BucketNameInvalid,
    BucketNotFound,
    DigestError,
    EntityTooLarge,
    GenericBucketError,
    GenericObjectError,
    ImplementationError,
    InvalidACL,
    InvalidDigest,
    InvalidRange,
    ObjectExists,
    ObjectNameInvalid,
    ObjectNotFound,
    OperationNotPermitted,
    StorageError,
    TooManyBuckets,
)

RENDERED = [
    (InvalidACL("public-write"), "Requested ACL is public-write invalid"),
    (BucketNameInvalid("Bad_Name"), "Bucket name invalid: Bad_Name"),
    (BucketExists("photos"), "Bucket exists: photos"),
    (BucketNotFound("photos"), "Bucket not Found: photos"),
    (
        TooManyBuckets("photos"),
        "Bucket limit exceeded beyond 100, cannot create bucket: photos",
    ),
    (ObjectNotFound("b", "o"), "Object not Found: b#o"),
    (ObjectExists("b", "o"), "Object exists: b#o"),
    (ObjectNameInvalid("b", "a//b"), "Object name invalid: b#a//b"),
    (
        EntityTooLarge("b", "o", "10MB", "5MB"),
        "b#owith 10MBreached maximum allowed size limit 5MB",
    ),
    (
        BadDigest("b", "k", "d41d8cd9"),
        "Md5 provided d41d8cd9 mismatches for: b#k",
    ),
    (InvalidDigest("b", "k", "zzz"), "Md5 provided zzz is invalid"),
    (BackendCorrupted("/data/disk1/b/o"), "Backend corrupted: /data/disk1/b/o"),
    (APINotImplemented("ListMultipartUploads"), "Api not implemented: ListMultipartUploads"),
    (
        OperationNotPermitted("DeleteBucket", "bucket not empty"),
        "Operation DeleteBucket not permitted for reason: bucket not empty",
    ),
    (InvalidRange(5, -1), "Invalid range start:5 length:-1"),
]


class TestRendering:
    """Test the message template of every kind."""

    @pytest.mark.parametrize(
        "error,expected", RENDERED, ids=[type(e).__name__ for e, _ in RENDERED]
    )
    def test_render(self, error, expected):
        """Test that each kind renders its exact template."""
        assert error.render() == expected

    @pytest.mark.parametrize(
        "error,expected", RENDERED, ids=[type(e).__name__ for e, _ in RENDERED]
    )
    def test_str_and_args_match_render(self, error, expected):
        """Test that str() and args carry the rendered message."""
        assert str(error) == expected
        assert error.args == (expected,)

    def test_entity_too_large_keeps_unspaced_format(self):
        """Test that the EntityTooLarge message is not given extra spaces."""
        message = EntityTooLarge("b", "o", "10MB", "5MB").render()

        assert "owith" in message
        assert "10MBreached" in message
        assert "o with" not in message

    def test_invalid_range_formats_plain_integers(self):
        """Test that range bounds render in base 10 without separators."""
        error = InvalidRange(1234567890123, 0)
        assert error.render() == "Invalid range start:1234567890123 length:0"

    def test_rendering_is_pure(self):
        """Test that equal fields always produce identical messages."""
        first = EntityTooLarge("b", "o", "10MB", "5MB")
        second = EntityTooLarge("b", "o", "10MB", "5MB")

        assert first.render() == second.render()
        assert first.render() == first.render()

    def test_fields_are_not_normalized(self):
        """Test that field values are rendered exactly as given."""
        error = BucketNotFound("  Mixed Case  ")
        assert error.bucket == "  Mixed Case  "
        assert error.render() == "Bucket not Found:   Mixed Case  "

    def test_empty_fields_are_accepted(self):
        """Test that empty strings are valid field values."""
        assert ObjectNotFound("", "").render() == "Object not Found: #"


class TestFields:
    """Test field storage and immutability."""

    def test_shape_fields(self):
        """Test that kinds expose the fields of their shape."""
        bucket_error = TooManyBuckets("photos")
        object_error = ObjectExists("photos", "cat.jpg")
        digest_error = BadDigest("photos", "cat.jpg", "abc")
        backend_error = BackendCorrupted("/mnt/disk")

        assert bucket_error.bucket == "photos"
        assert (object_error.bucket, object_error.object) == ("photos", "cat.jpg")
        assert (digest_error.bucket, digest_error.key, digest_error.digest) == (
            "photos",
            "cat.jpg",
            "abc",
        )
        assert backend_error.path == "/mnt/disk"

    def test_entity_too_large_fields(self):
        """Test that EntityTooLarge carries object identity and sizes."""
        error = EntityTooLarge("b", "o", "10MB", "5MB")

        assert error.bucket == "b"
        assert error.object == "o"
        assert error.size == "10MB"
        assert error.total_size == "5MB"

    def test_fields_are_read_only(self):
        """Test that fields cannot be reassigned after construction."""
        error = BucketNotFound("photos")

        with pytest.raises(AttributeError, match="read-only"):
            error.bucket = "videos"

        with pytest.raises(AttributeError, match="read-only"):
            del error.bucket

        assert error.bucket == "photos"
        assert error.render() == "Bucket not Found: photos"

    def test_extra_fields_are_not_accepted(self):
        """Test that construction takes exactly the declared fields."""
        with pytest.raises(TypeError):
            BucketNotFound("photos", "cat.jpg")  # type: ignore[call-arg]

        with pytest.raises(TypeError):
            ObjectNotFound("photos")  # type: ignore[call-arg]

    def test_repr(self):
        """Test that repr shows the kind and its fields."""
        assert repr(InvalidRange(0, 10)) == "InvalidRange(start=0, length=10)"
        assert repr(ObjectExists("b", "o")) == "ObjectExists(bucket='b', object='o')"


class TestValueSemantics:
    """Test equality, hashing and pickling."""

    def test_equal_fields_compare_equal(self):
        """Test that same kind and fields compare equal."""
        assert BucketNotFound("photos") == BucketNotFound("photos")
        assert BucketNotFound("photos") != BucketNotFound("videos")

    def test_different_kinds_never_equal(self):
        """Test that kinds sharing a shape are still distinct values."""
        assert BucketNotFound("photos") != BucketExists("photos")
        assert BadDigest("b", "k", "d") != InvalidDigest("b", "k", "d")

    def test_hashable(self):
        """Test that errors can be used in sets and as dict keys."""
        errors = {BucketNotFound("photos"), BucketNotFound("photos"), BucketExists("photos")}
        assert len(errors) == 2

    @pytest.mark.parametrize(
        "error", [error for error, _ in RENDERED], ids=[type(e).__name__ for e, _ in RENDERED]
    )
    def test_pickle(self, error):
        """Test that errors survive crossing a process boundary."""
        restored = pickle.loads(pickle.dumps(error))

        assert type(restored) is type(error)
        assert restored == error
        assert str(restored) == str(error)


class TestKindDiscrimination:
    """Test that callers can dispatch on kind."""

    def test_error_kinds_are_distinct(self):
        """Test that the kind list has no duplicates."""
        assert len(ERROR_KINDS) == 16
        assert len(set(ERROR_KINDS)) == len(ERROR_KINDS)

    def test_no_kind_is_subclass_of_another(self):
        """Test that isinstance dispatch is order-independent."""
        for kind in ERROR_KINDS:
            for other in ERROR_KINDS:
                if kind is not other:
                    assert not issubclass(kind, other)

    def test_each_instance_matches_exactly_one_kind(self):
        """Test that every rendered example matches only its own kind."""
        for error, _ in RENDERED:
            matches = [kind for kind in ERROR_KINDS if isinstance(error, kind)]
            assert matches == [type(error)]

    def test_all_kinds_are_storage_errors(self):
        """Test that a single except clause catches every kind."""
        for kind in ERROR_KINDS:
            assert issubclass(kind, StorageError)
            assert issubclass(kind, Exception)

    def test_shapes_group_families(self):
        """Test that shapes catch the kinds built on them."""
        assert isinstance(TooManyBuckets("b"), GenericBucketError)
        assert isinstance(EntityTooLarge("b", "o", "1", "2"), GenericObjectError)
        assert isinstance(InvalidDigest("b", "k", "d"), DigestError)
        assert isinstance(BackendCorrupted("/p"), BackendError)
        assert not isinstance(ObjectNotFound("b", "o"), GenericBucketError)
        assert not isinstance(ImplementationError("b", "o", OSError()), GenericObjectError)

    def test_match_statement_dispatch(self):
        """Test dispatch with class patterns."""

        def status(error: StorageError) -> str:
            match error:
                case BucketNotFound(bucket=bucket):
                    return f"missing bucket {bucket}"
                case ObjectNotFound():
                    return "missing object"
                case BadDigest() | InvalidDigest():
                    return "digest"
                case _:
                    return "other"

        assert status(BucketNotFound("photos")) == "missing bucket photos"
        assert status(ObjectNotFound("b", "o")) == "missing object"
        assert status(InvalidDigest("b", "k", "d")) == "digest"
        assert status(BackendCorrupted("/p")) == "other"

    def test_raise_and_catch_by_kind(self):
        """Test that kinds behave as ordinary exceptions."""
        with pytest.raises(BucketNotFound) as exc_info:
            raise BucketNotFound("photos")

        assert exc_info.value.bucket == "photos"

        with pytest.raises(GenericBucketError):
            raise BucketExists("photos")

    def test_shape_cannot_be_constructed(self):
        """Test that shapes on their own are rejected with a clear message."""
        with pytest.raises(TypeError, match="GenericBucketError is an error shape"):
            GenericBucketError("photos")

        with pytest.raises(TypeError, match="DigestError is an error shape"):
            DigestError("b", "k", "d")
