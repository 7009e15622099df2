"""Root conftest — shared test configuration."""

import os

# Keep tests independent of any SAMPLE_API_* values in the developer's shell
for _key in [k for k in os.environ if k.upper().startswith("SAMPLE_API_")]:
    del os.environ[_key]
