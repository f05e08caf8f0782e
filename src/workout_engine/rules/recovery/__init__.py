"""Recovery-signal rules: readiness, sleep, HRV."""
