# Services package.
#
#   news_service  — create, paginated list, lookups and merge-update /
#                   delete for the News aggregate
#
# All service functions accept an AsyncSession as their first argument
# so that the router layer controls the transaction boundary via the
# ``get_db`` dependency.
