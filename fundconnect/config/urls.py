""" Urls of the modules define here... """

# All Namespaces...
from ..auth.handler import auth_namespace
from ..funds.handler import fund_namespace
from ..interests.handler import interest_namespace
from ..investors.handler import investor_namespace
from ..messaging.handler import conversation_namespace
from ..notifications.handler import notification_namespace
from ..storage.handler import storage_namespace





# Adding the namespaces
class URLs:
    """ All application namespaces will be declare here... """

    @staticmethod
    def add_namespaces(api):
        """ Function for adding namespaces... """

        api.add_namespace(auth_namespace)
        api.add_namespace(fund_namespace)
        api.add_namespace(interest_namespace)
        api.add_namespace(investor_namespace)
        api.add_namespace(conversation_namespace)
        api.add_namespace(notification_namespace)
        api.add_namespace(storage_namespace)
