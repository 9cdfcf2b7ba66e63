"""Operations on MediTrack records."""
