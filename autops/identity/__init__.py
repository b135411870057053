"""Users and other entities that security policies can be attached to."""