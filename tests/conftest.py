import pytest
from lazyseq import seterr


@pytest.fixture(autouse=True)
def default_error_setting():
    seterr('wrap')
    yield
    seterr('wrap')
