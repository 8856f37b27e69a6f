"""Building blocks of the rendering pipeline and the collaborators it talks to."""
