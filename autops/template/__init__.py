"""Infrastructure and configuration templates and their typed attributes."""