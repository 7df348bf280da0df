"""Administrative service for the billiards hall point-of-sale backend."""
