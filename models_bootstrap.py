# models_bootstrap.py
from account import models as _account_models
from employee import models as _employee_models
from food import models as _food_models
from invoice import models as _invoice_models
from food_invoice import models as _food_invoice_models
from seat_type import models as _seat_type_models
