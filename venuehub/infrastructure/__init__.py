"""Infrastructure: Firestore adapter, repository cache, Firestore repositories."""
