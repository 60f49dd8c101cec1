"""Team data join service: identity resolution and public/private joins."""
