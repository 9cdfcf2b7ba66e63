"""Flask front end for MediTrack."""
