"""Security policies, their statements, effects and actions."""