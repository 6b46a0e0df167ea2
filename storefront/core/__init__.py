# storefront/core
# Framework-independent business rules. Every function takes the ShopStore and,
# for protected operations, the caller's Session (None when anonymous).
