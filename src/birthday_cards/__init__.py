"""Birthday Cards package.

Keeps employee birthdays and card templates in JSON collection files and
emails each employee on their birthday. Organized by feature modules
(employees, card_templates, notifier, storage) with a thin Flask controller
layer over service/repository layers.
"""
