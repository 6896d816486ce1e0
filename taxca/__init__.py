"""Canadian federal and provincial tax calculations."""
