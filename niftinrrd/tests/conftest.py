from ..nifti1 import data_type_codes

# Labels of datatypes with a numpy dtype we can decode voxels to.  xdist needs
# a consistent ordering, so sort.
DECODABLE_LABELS = sorted(
    label
    for code, label in data_type_codes.label.items()
    if isinstance(code, int) and data_type_codes.dtype[code].itemsize > 0
)


# Generate dynamic fixtures
def pytest_generate_tests(metafunc):
    if 'supported_label' in metafunc.fixturenames:
        metafunc.parametrize('supported_label', DECODABLE_LABELS)
