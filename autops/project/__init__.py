"""Projects grouping templates, workflows and policies."""