# Tests for harmonic_transport
#
# Test organization mirrors source structure:
#   - test_transport/test_trajectories.py: trajectory model, formulas, registries
#   - test_transport/test_configurations.py: TransportParameters and presets
#   - test_transport/test_sampling.py: time-grid evaluation
#
# Running tests:
#   pytest tests/
#   pytest tests/test_transport/ -v
#   pytest tests/ -k "lewis_riesenfeld"
