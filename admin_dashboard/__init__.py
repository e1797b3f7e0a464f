"""Admin dashboard backend: users, subscriptions, support tickets, activity logs."""
