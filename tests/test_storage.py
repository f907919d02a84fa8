import copy

import numpy as np
import pytest

from cortex import BufferStorage, ElementType


@pytest.fixture
def storage():
    return BufferStorage(4, ElementType(np.int64))


def test_new_storage_is_unconstructed(storage: BufferStorage):
    assert storage.capacity == 4
    assert storage.constructed == 0

    with pytest.raises(IndexError):
        storage[0]


def test_construct(storage: BufferStorage):
    storage.construct(2, 7)

    assert storage.constructed == 2
    assert storage[0] == 7
    assert storage[1] == 7

    with pytest.raises(IndexError):
        storage[2]

    with pytest.raises(IndexError):
        storage[2] = 1


def test_construct_defaults(storage: BufferStorage):
    storage.construct(4)

    assert storage.buffer.tolist() == [0, 0, 0, 0]


def test_construct_beyond_capacity(storage: BufferStorage):
    storage.construct(2)

    with pytest.raises(ValueError):
        storage.construct(3)

    assert storage.constructed == 2


def test_construct_from(storage: BufferStorage):
    storage.construct(2, 9)
    storage.construct_from([1, 2])

    assert storage.constructed == 4
    assert storage.buffer.tolist() == [9, 9, 1, 2]


def test_destroy_keeps_the_allocation(storage: BufferStorage):
    buffer = storage.buffer
    storage.construct(4, 3)

    storage.destroy()

    assert storage.constructed == 0
    assert storage.capacity == 4
    assert storage.buffer is buffer

    with pytest.raises(IndexError):
        storage[0]


def test_destroy_drops_object_references():
    storage = BufferStorage(2, ElementType(object))
    storage.construct(2, "x")

    storage.destroy()

    assert storage.buffer[0] is None
    assert storage.buffer[1] is None


def test_object_fill_keeps_sequences_whole():
    storage = BufferStorage(2, ElementType(object))
    storage.construct(2, [1, 2])

    assert storage[0] == [1, 2]
    assert storage[1] == [1, 2]


def test_copy(storage: BufferStorage):
    storage.construct_from([1, 2, 3])

    other = storage.copy()
    other[0] = 10

    assert other.capacity == 4
    assert other.constructed == 3
    assert storage[0] == 1


def test_deep_copy_of_objects():
    storage = BufferStorage(1, ElementType(object))
    storage.construct_from([[1]])

    shallow = storage.copy()
    deep = storage.copy(deep=True)

    assert shallow[0] is storage[0]
    assert deep[0] is not storage[0]
    assert deep[0] == [1]


def test_regrid():
    storage = BufferStorage(6, ElementType(np.int64))
    storage.construct_from(range(1, 7))

    grown = storage.regrid((3, 2), (4, 3))

    assert grown.capacity == 12
    assert grown.constructed == 12
    assert grown.buffer.tolist() == [1, 2, 3, 0, 4, 5, 6, 0, 0, 0, 0, 0]
    assert storage.buffer.tolist() == [1, 2, 3, 4, 5, 6]


def test_regrid_taller_only():
    storage = BufferStorage(4, ElementType(np.int64))
    storage.construct_from([1, 2, 3, 4])

    grown = storage.regrid((2, 2), (2, 3))

    assert grown.buffer.tolist() == [1, 2, 3, 4, 0, 0]


def test_regrid_rejects_shrinking():
    storage = BufferStorage(6, ElementType(np.int64))
    storage.construct(6)

    with pytest.raises(ValueError):
        storage.regrid((3, 2), (2, 5))

    with pytest.raises(ValueError):
        storage.regrid((3, 2), (4, 1))


def test_regrid_requires_matching_grid():
    storage = BufferStorage(6, ElementType(np.int64))
    storage.construct(4)

    with pytest.raises(ValueError):
        storage.regrid((3, 2), (4, 3))


def test_negative_capacity():
    with pytest.raises(ValueError):
        BufferStorage(-1, ElementType(np.int64))


################################################################################


def test_element_type_defaults():
    element = ElementType(np.int32)

    assert element.dtype == np.dtype(np.int32)
    assert element.default == 0
    assert isinstance(element.default, np.int32)
    assert ElementType(object).default is None
    assert ElementType(np.float64, default=1.5).default == 1.5


def test_element_type_inference():
    assert ElementType.infer(1).dtype == np.asarray(1).dtype
    assert ElementType.infer(1.5).dtype == np.dtype(np.float64)
    assert ElementType.infer(True).dtype == np.dtype(bool)
    assert ElementType.infer(np.float32(2)).dtype == np.dtype(np.float32)
    assert ElementType.infer("text").dtype == np.dtype(object)
    assert ElementType.infer([1, 2]).dtype == np.dtype(object)


def test_element_type_state():
    element = ElementType(np.float32, default=1.5)
    state = element.state()

    assert state == {"dtype": "float32", "default": 1.5}

    restored = ElementType(np.int8)
    restored.load_state(state)

    assert restored.dtype == np.dtype(np.float32)
    assert restored.default == 1.5
    assert isinstance(restored.default, np.float32)


def test_element_type_state_for_objects():
    restored = copy.copy(ElementType(np.int8))
    restored.load_state(ElementType(object).state())

    assert restored.dtype == np.dtype(object)
    assert restored.default is None
