"""Key material types and JWK conversion."""
