"""
Declarations of the resources exposed by the PrestaShop web service.

Each resource is a :py:class:`ResourceDescriptor` value; :py:data:`REGISTRY`
indexes them by collection name so that an accessor can be obtained for any
resource without a dedicated class.
"""

import typing

from .models import ResourceAssociationDescriptor, ResourceDescriptor, ResourceFieldDescriptor


ADDRESS = ResourceDescriptor(
    node_name="address",
    name="addresses",
    fields=[
        ResourceFieldDescriptor("id_customer"),
        ResourceFieldDescriptor("id_manufacturer"),
        ResourceFieldDescriptor("id_supplier"),
        ResourceFieldDescriptor("id_warehouse"),
        ResourceFieldDescriptor("id_country", required=True),
        ResourceFieldDescriptor("id_state"),
        ResourceFieldDescriptor("alias", required=True),
        ResourceFieldDescriptor("company"),
        ResourceFieldDescriptor("lastname", required=True),
        ResourceFieldDescriptor("firstname", required=True),
        ResourceFieldDescriptor("vat_number"),
        ResourceFieldDescriptor("address1", required=True),
        ResourceFieldDescriptor("address2"),
        ResourceFieldDescriptor("postcode"),
        ResourceFieldDescriptor("city", required=True),
        ResourceFieldDescriptor("other"),
        ResourceFieldDescriptor("phone"),
        ResourceFieldDescriptor("phone_mobile"),
        ResourceFieldDescriptor("dni"),
        ResourceFieldDescriptor("deleted"),
        ResourceFieldDescriptor("date_add"),
        ResourceFieldDescriptor("date_upd"),
    ],
)


CARRIER = ResourceDescriptor(
    node_name="carrier",
    name="carriers",
    fields=[
        ResourceFieldDescriptor("deleted"),
        ResourceFieldDescriptor("is_module"),
        ResourceFieldDescriptor("id_tax_rules_group"),
        ResourceFieldDescriptor("id_reference"),
        ResourceFieldDescriptor("name", required=True),
        ResourceFieldDescriptor("active", required=True),
        ResourceFieldDescriptor("is_free"),
        ResourceFieldDescriptor("url"),
        ResourceFieldDescriptor("shipping_handling"),
        ResourceFieldDescriptor("shipping_external"),
        ResourceFieldDescriptor("range_behavior"),
        ResourceFieldDescriptor("shipping_method"),
        ResourceFieldDescriptor("max_width"),
        ResourceFieldDescriptor("max_height"),
        ResourceFieldDescriptor("max_depth"),
        ResourceFieldDescriptor("max_weight"),
        ResourceFieldDescriptor("grade"),
        ResourceFieldDescriptor("external_module_name"),
        ResourceFieldDescriptor("need_range"),
        ResourceFieldDescriptor("position"),
        ResourceFieldDescriptor("delay", translatable=True, required=True),
    ],
)


CART_RULE = ResourceDescriptor(
    node_name="cart_rule",
    name="cart_rules",
    fields=[
        ResourceFieldDescriptor("id_customer"),
        ResourceFieldDescriptor("date_from", required=True),
        ResourceFieldDescriptor("date_to", required=True),
        ResourceFieldDescriptor("description"),
        ResourceFieldDescriptor("quantity"),
        ResourceFieldDescriptor("quantity_per_user"),
        ResourceFieldDescriptor("priority"),
        ResourceFieldDescriptor("partial_use"),
        ResourceFieldDescriptor("code"),
        ResourceFieldDescriptor("minimum_amount"),
        ResourceFieldDescriptor("minimum_amount_tax"),
        ResourceFieldDescriptor("minimum_amount_currency"),
        ResourceFieldDescriptor("minimum_amount_shipping"),
        ResourceFieldDescriptor("country_restriction"),
        ResourceFieldDescriptor("carrier_restriction"),
        ResourceFieldDescriptor("group_restriction"),
        ResourceFieldDescriptor("cart_rule_restriction"),
        ResourceFieldDescriptor("product_restriction"),
        ResourceFieldDescriptor("shop_restriction"),
        ResourceFieldDescriptor("free_shipping"),
        ResourceFieldDescriptor("reduction_percent"),
        ResourceFieldDescriptor("reduction_amount"),
        ResourceFieldDescriptor("reduction_tax"),
        ResourceFieldDescriptor("reduction_currency"),
        ResourceFieldDescriptor("reduction_product"),
        ResourceFieldDescriptor("gift_product"),
        ResourceFieldDescriptor("gift_product_attribute"),
        ResourceFieldDescriptor("highlight"),
        ResourceFieldDescriptor("active"),
        ResourceFieldDescriptor("date_add"),
        ResourceFieldDescriptor("date_upd"),
        ResourceFieldDescriptor("name", translatable=True, required=True),
    ],
)


CART = ResourceDescriptor(
    node_name="cart",
    name="carts",
    fields=[
        ResourceFieldDescriptor("id_address_delivery"),
        ResourceFieldDescriptor("id_address_invoice"),
        ResourceFieldDescriptor("id_currency", required=True),
        ResourceFieldDescriptor("id_customer"),
        ResourceFieldDescriptor("id_guest"),
        ResourceFieldDescriptor("id_lang", required=True),
        ResourceFieldDescriptor("id_shop_group"),
        ResourceFieldDescriptor("id_shop"),
        ResourceFieldDescriptor("id_carrier"),
        ResourceFieldDescriptor("recyclable"),
        ResourceFieldDescriptor("gift"),
        ResourceFieldDescriptor("gift_message"),
        ResourceFieldDescriptor("mobile_theme"),
        ResourceFieldDescriptor("delivery_option"),
        ResourceFieldDescriptor("secure_key"),
        ResourceFieldDescriptor("allow_seperated_package"),
        ResourceFieldDescriptor("date_add"),
        ResourceFieldDescriptor("date_upd"),
    ],
    associations=[
        ResourceAssociationDescriptor(
            "cart_rows",
            {
                "cart_row": [
                    "id_product",
                    "id_product_attribute",
                    "id_address_delivery",
                    "quantity",
                ]
            },
        ),
    ],
)


CATEGORY = ResourceDescriptor(
    node_name="category",
    name="categories",
    fields=[
        ResourceFieldDescriptor("id_parent"),
        ResourceFieldDescriptor("level_depth", read_only=True),
        ResourceFieldDescriptor("nb_products_recursive", read_only=True),
        ResourceFieldDescriptor("active", required=True),
        ResourceFieldDescriptor("id_shop_default"),
        ResourceFieldDescriptor("is_root_category"),
        ResourceFieldDescriptor("position"),
        ResourceFieldDescriptor("date_add"),
        ResourceFieldDescriptor("date_upd"),
        ResourceFieldDescriptor("name", translatable=True, required=True),
        ResourceFieldDescriptor("link_rewrite", translatable=True, required=True),
        ResourceFieldDescriptor("description", translatable=True),
        ResourceFieldDescriptor("meta_title", translatable=True),
        ResourceFieldDescriptor("meta_description", translatable=True),
        ResourceFieldDescriptor("meta_keywords", translatable=True),
    ],
    associations=[
        ResourceAssociationDescriptor("categories", {"category": ["id"]}),
        ResourceAssociationDescriptor("products", {"product": ["id"]}),
    ],
)


COMBINATION = ResourceDescriptor(
    node_name="combination",
    name="combinations",
    fields=[
        ResourceFieldDescriptor("id_product", required=True),
        ResourceFieldDescriptor("location"),
        ResourceFieldDescriptor("ean13"),
        ResourceFieldDescriptor("upc"),
        ResourceFieldDescriptor("quantity"),
        ResourceFieldDescriptor("reference"),
        ResourceFieldDescriptor("supplier_reference"),
        ResourceFieldDescriptor("wholesale_price"),
        ResourceFieldDescriptor("price"),
        ResourceFieldDescriptor("ecotax"),
        ResourceFieldDescriptor("weight"),
        ResourceFieldDescriptor("unit_price_impact"),
        ResourceFieldDescriptor("minimal_quantity", required=True),
        ResourceFieldDescriptor("default_on"),
        ResourceFieldDescriptor("available_date"),
    ],
    associations=[
        ResourceAssociationDescriptor("product_option_values", {"product_option_value": ["id"]}),
        ResourceAssociationDescriptor("images", {"image": ["id"]}),
    ],
)


CONFIGURATION = ResourceDescriptor(
    node_name="configuration",
    name="configurations",
    fields=[
        ResourceFieldDescriptor("value"),
        ResourceFieldDescriptor("name", required=True),
        ResourceFieldDescriptor("id_shop_group"),
        ResourceFieldDescriptor("id_shop"),
        ResourceFieldDescriptor("date_add"),
        ResourceFieldDescriptor("date_upd"),
    ],
)


CONTACT = ResourceDescriptor(
    node_name="contact",
    name="contacts",
    fields=[
        ResourceFieldDescriptor("email"),
        ResourceFieldDescriptor("customer_service"),
        ResourceFieldDescriptor("name", translatable=True, required=True),
        ResourceFieldDescriptor("description", translatable=True),
    ],
)


CONTENT = ResourceDescriptor(
    node_name="content",
    name="content_management_system",
    fields=[
        ResourceFieldDescriptor("id_cms_category"),
        ResourceFieldDescriptor("position"),
        ResourceFieldDescriptor("indexation"),
        ResourceFieldDescriptor("active"),
        ResourceFieldDescriptor("meta_description", translatable=True),
        ResourceFieldDescriptor("meta_keywords", translatable=True),
        ResourceFieldDescriptor("meta_title", translatable=True, required=True),
        ResourceFieldDescriptor("link_rewrite", translatable=True, required=True),
        ResourceFieldDescriptor("content", translatable=True),
    ],
)


COUNTRY = ResourceDescriptor(
    node_name="country",
    name="countries",
    fields=[
        ResourceFieldDescriptor("id_zone", required=True),
        ResourceFieldDescriptor("id_currency"),
        ResourceFieldDescriptor("call_prefix"),
        ResourceFieldDescriptor("iso_code", required=True),
        ResourceFieldDescriptor("active"),
        ResourceFieldDescriptor("contains_states", required=True),
        ResourceFieldDescriptor("need_identification_number", required=True),
        ResourceFieldDescriptor("need_zip_code"),
        ResourceFieldDescriptor("zip_code_format"),
        ResourceFieldDescriptor("display_tax_label", required=True),
        ResourceFieldDescriptor("name", translatable=True, required=True),
    ],
)


CURRENCY = ResourceDescriptor(
    node_name="currency",
    name="currencies",
    fields=[
        ResourceFieldDescriptor("name", required=True),
        ResourceFieldDescriptor("iso_code", required=True),
        ResourceFieldDescriptor("iso_code_num"),
        ResourceFieldDescriptor("blank"),
        ResourceFieldDescriptor("sign", required=True),
        ResourceFieldDescriptor("format", required=True),
        ResourceFieldDescriptor("decimals", required=True),
        ResourceFieldDescriptor("conversion_rate", required=True),
        ResourceFieldDescriptor("deleted"),
        ResourceFieldDescriptor("active"),
    ],
)


CUSTOMER_MESSAGE = ResourceDescriptor(
    node_name="customer_message",
    name="customer_messages",
    fields=[
        ResourceFieldDescriptor("id_employee"),
        ResourceFieldDescriptor("id_customer_thread"),
        ResourceFieldDescriptor("ip_address"),
        ResourceFieldDescriptor("message", required=True),
        ResourceFieldDescriptor("file_name"),
        ResourceFieldDescriptor("user_agent"),
        ResourceFieldDescriptor("ps_private"),
        ResourceFieldDescriptor("date_add"),
        ResourceFieldDescriptor("date_upd"),
        ResourceFieldDescriptor("read"),
    ],
)


CUSTOMER_THREAD = ResourceDescriptor(
    node_name="customer_thread",
    name="customer_threads",
    fields=[
        ResourceFieldDescriptor("id_lang", required=True),
        ResourceFieldDescriptor("id_shop"),
        ResourceFieldDescriptor("id_customer"),
        ResourceFieldDescriptor("id_order"),
        ResourceFieldDescriptor("id_product"),
        ResourceFieldDescriptor("id_contact", required=True),
        ResourceFieldDescriptor("email"),
        ResourceFieldDescriptor("token", required=True),
        ResourceFieldDescriptor("status"),
        ResourceFieldDescriptor("date_add"),
        ResourceFieldDescriptor("date_upd"),
    ],
    associations=[
        ResourceAssociationDescriptor("customer_messages", {"customer_message": ["id"]}),
    ],
)


CUSTOMER = ResourceDescriptor(
    node_name="customer",
    name="customers",
    fields=[
        ResourceFieldDescriptor("id_default_group"),
        ResourceFieldDescriptor("id_lang"),
        ResourceFieldDescriptor("newsletter_date_add"),
        ResourceFieldDescriptor("ip_registration_newsletter"),
        ResourceFieldDescriptor("last_passwd_gen", read_only=True),
        ResourceFieldDescriptor("secure_key", read_only=True),
        ResourceFieldDescriptor("deleted"),
        ResourceFieldDescriptor("passwd", required=True),
        ResourceFieldDescriptor("lastname", required=True),
        ResourceFieldDescriptor("firstname", required=True),
        ResourceFieldDescriptor("email", required=True),
        ResourceFieldDescriptor("id_gender"),
        ResourceFieldDescriptor("birthday"),
        ResourceFieldDescriptor("newsletter"),
        ResourceFieldDescriptor("optin"),
        ResourceFieldDescriptor("website"),
        ResourceFieldDescriptor("company"),
        ResourceFieldDescriptor("siret"),
        ResourceFieldDescriptor("ape"),
        ResourceFieldDescriptor("outstanding_allow_amount"),
        ResourceFieldDescriptor("show_public_prices"),
        ResourceFieldDescriptor("id_risk"),
        ResourceFieldDescriptor("max_payment_days"),
        ResourceFieldDescriptor("active"),
        ResourceFieldDescriptor("note"),
        ResourceFieldDescriptor("is_guest"),
        ResourceFieldDescriptor("id_shop"),
        ResourceFieldDescriptor("id_shop_group"),
        ResourceFieldDescriptor("date_add"),
        ResourceFieldDescriptor("date_upd"),
    ],
    associations=[
        ResourceAssociationDescriptor("groups", {"group": ["id"]}),
    ],
)


CUSTOMIZATION = ResourceDescriptor(
    node_name="customization",
    name="customizations",
    fields=[
        ResourceFieldDescriptor("id_address_delivery", required=True),
        ResourceFieldDescriptor("id_cart", required=True),
        ResourceFieldDescriptor("id_product", required=True),
        ResourceFieldDescriptor("id_product_attribute", required=True),
        ResourceFieldDescriptor("quantity", required=True),
        ResourceFieldDescriptor("quantity_refunded", required=True),
        ResourceFieldDescriptor("quantity_returned", required=True),
        ResourceFieldDescriptor("in_cart", required=True),
    ],
    associations=[
        ResourceAssociationDescriptor(
            "customized_data_text_fields",
            {
                "customized_data_text_field": [
                    "id_customization_field",
                    "value",
                ]
            },
        ),
        ResourceAssociationDescriptor(
            "customized_data_images",
            {
                "customized_data_image": [
                    "id_customization_field",
                    "value",
                ]
            },
        ),
    ],
)


DELIVERY = ResourceDescriptor(
    node_name="delivery",
    name="deliveries",
    fields=[
        ResourceFieldDescriptor("id_carrier", required=True),
        ResourceFieldDescriptor("id_range_price", required=True),
        ResourceFieldDescriptor("id_range_weight", required=True),
        ResourceFieldDescriptor("id_zone", required=True),
        ResourceFieldDescriptor("id_shop"),
        ResourceFieldDescriptor("id_shop_group"),
        ResourceFieldDescriptor("price", required=True),
    ],
)


EMPLOYEE = ResourceDescriptor(
    node_name="employee",
    name="employees",
    fields=[
        ResourceFieldDescriptor("id_lang", required=True),
        ResourceFieldDescriptor("last_passwd_gen", read_only=True),
        ResourceFieldDescriptor("stats_date_from", read_only=True),
        ResourceFieldDescriptor("stats_date_to", read_only=True),
        ResourceFieldDescriptor("stats_compare_from", read_only=True),
        ResourceFieldDescriptor("stats_compare_to", read_only=True),
        ResourceFieldDescriptor("passwd", required=True),
        ResourceFieldDescriptor("lastname", required=True),
        ResourceFieldDescriptor("firstname", required=True),
        ResourceFieldDescriptor("email", required=True),
        ResourceFieldDescriptor("active"),
        ResourceFieldDescriptor("optin"),
        ResourceFieldDescriptor("id_profile", required=True),
        ResourceFieldDescriptor("bo_color"),
        ResourceFieldDescriptor("default_tab"),
        ResourceFieldDescriptor("bo_theme"),
        ResourceFieldDescriptor("bo_css"),
        ResourceFieldDescriptor("bo_width"),
        ResourceFieldDescriptor("bo_menu"),
        ResourceFieldDescriptor("stats_compare_option"),
        ResourceFieldDescriptor("preselect_date_range"),
        ResourceFieldDescriptor("id_last_order"),
        ResourceFieldDescriptor("id_last_customer_message"),
        ResourceFieldDescriptor("id_last_customer"),
    ],
)


GROUP = ResourceDescriptor(
    node_name="group",
    name="groups",
    fields=[
        ResourceFieldDescriptor("reduction"),
        ResourceFieldDescriptor("price_display_method", required=True),
        ResourceFieldDescriptor("show_prices"),
        ResourceFieldDescriptor("date_add"),
        ResourceFieldDescriptor("date_upd"),
        ResourceFieldDescriptor("name", translatable=True, required=True),
    ],
)


GUEST = ResourceDescriptor(
    node_name="guest",
    name="guests",
    fields=[
        ResourceFieldDescriptor("id_customer"),
        ResourceFieldDescriptor("id_operating_system"),
        ResourceFieldDescriptor("id_web_browser"),
        ResourceFieldDescriptor("javascript"),
        ResourceFieldDescriptor("screen_resolution_x"),
        ResourceFieldDescriptor("screen_resolution_y"),
        ResourceFieldDescriptor("screen_color"),
        ResourceFieldDescriptor("sun_java"),
        ResourceFieldDescriptor("adobe_flash"),
        ResourceFieldDescriptor("adobe_director"),
        ResourceFieldDescriptor("apple_quicktime"),
        ResourceFieldDescriptor("real_player"),
        ResourceFieldDescriptor("windows_media"),
        ResourceFieldDescriptor("accept_language"),
        ResourceFieldDescriptor("mobile_theme"),
    ],
)


IMAGE_TYPE = ResourceDescriptor(
    node_name="image_type",
    name="image_types",
    fields=[
        ResourceFieldDescriptor("name", required=True),
        ResourceFieldDescriptor("width", required=True),
        ResourceFieldDescriptor("height", required=True),
        ResourceFieldDescriptor("categories"),
        ResourceFieldDescriptor("products"),
        ResourceFieldDescriptor("manufacturers"),
        ResourceFieldDescriptor("suppliers"),
        ResourceFieldDescriptor("scenes"),
        ResourceFieldDescriptor("stores"),
    ],
)


LANGUAGE = ResourceDescriptor(
    node_name="language",
    name="languages",
    fields=[
        ResourceFieldDescriptor("name", required=True),
        ResourceFieldDescriptor("iso_code", required=True),
        ResourceFieldDescriptor("language_code"),
        ResourceFieldDescriptor("active"),
        ResourceFieldDescriptor("is_rtl"),
        ResourceFieldDescriptor("date_format_lite", required=True),
        ResourceFieldDescriptor("date_format_full", required=True),
    ],
)


MANUFACTURER = ResourceDescriptor(
    node_name="manufacturer",
    name="manufacturers",
    fields=[
        ResourceFieldDescriptor("active"),
        ResourceFieldDescriptor("link_rewrite", read_only=True),
        ResourceFieldDescriptor("name", required=True),
        ResourceFieldDescriptor("date_add"),
        ResourceFieldDescriptor("date_upd"),
        ResourceFieldDescriptor("description", translatable=True),
        ResourceFieldDescriptor("short_description", translatable=True),
        ResourceFieldDescriptor("meta_title", translatable=True),
        ResourceFieldDescriptor("meta_description", translatable=True),
        ResourceFieldDescriptor("meta_keywords", translatable=True),
    ],
    associations=[
        ResourceAssociationDescriptor("addresses", {"address": ["id"]}),
    ],
)


ORDER_CARRIER = ResourceDescriptor(
    node_name="order_carrier",
    name="order_carriers",
    fields=[
        ResourceFieldDescriptor("id_order", required=True),
        ResourceFieldDescriptor("id_carrier", required=True),
        ResourceFieldDescriptor("id_order_invoice"),
        ResourceFieldDescriptor("weight"),
        ResourceFieldDescriptor("shipping_cost_tax_excl"),
        ResourceFieldDescriptor("shipping_cost_tax_incl"),
        ResourceFieldDescriptor("tracking_number"),
        ResourceFieldDescriptor("date_add"),
    ],
)


ORDER_DETAIL = ResourceDescriptor(
    node_name="order_detail",
    name="order_details",
    fields=[
        ResourceFieldDescriptor("id_order", required=True),
        ResourceFieldDescriptor("product_id"),
        ResourceFieldDescriptor("product_attribute_id"),
        ResourceFieldDescriptor("product_quantity_reinjected"),
        ResourceFieldDescriptor("group_reduction"),
        ResourceFieldDescriptor("discount_quantity_applied"),
        ResourceFieldDescriptor("download_hash"),
        ResourceFieldDescriptor("download_deadline"),
        ResourceFieldDescriptor("id_order_invoice"),
        ResourceFieldDescriptor("id_warehouse", required=True),
        ResourceFieldDescriptor("id_shop", required=True),
        ResourceFieldDescriptor("product_name", required=True),
        ResourceFieldDescriptor("product_quantity", required=True),
        ResourceFieldDescriptor("product_quantity_in_stock"),
        ResourceFieldDescriptor("product_quantity_return"),
        ResourceFieldDescriptor("product_quantity_refunded"),
        ResourceFieldDescriptor("product_price", required=True),
        ResourceFieldDescriptor("reduction_percent"),
        ResourceFieldDescriptor("reduction_amount"),
        ResourceFieldDescriptor("reduction_amount_tax_incl"),
        ResourceFieldDescriptor("reduction_amount_tax_excl"),
        ResourceFieldDescriptor("product_quantity_discount"),
        ResourceFieldDescriptor("product_ean13"),
        ResourceFieldDescriptor("product_upc"),
        ResourceFieldDescriptor("product_reference"),
        ResourceFieldDescriptor("product_supplier_reference"),
        ResourceFieldDescriptor("product_weight"),
        ResourceFieldDescriptor("tax_computation_method"),
        ResourceFieldDescriptor("id_tax_rules_group"),
        ResourceFieldDescriptor("ecotax"),
        ResourceFieldDescriptor("ecotax_tax_rate"),
        ResourceFieldDescriptor("download_nb"),
        ResourceFieldDescriptor("unit_price_tax_incl"),
        ResourceFieldDescriptor("unit_price_tax_excl"),
        ResourceFieldDescriptor("total_price_tax_incl"),
        ResourceFieldDescriptor("total_price_tax_excl"),
        ResourceFieldDescriptor("total_shipping_price_tax_excl"),
        ResourceFieldDescriptor("total_shipping_price_tax_incl"),
        ResourceFieldDescriptor("purchase_supplier_price"),
        ResourceFieldDescriptor("original_product_price"),
        ResourceFieldDescriptor("original_wholesale_price"),
    ],
    associations=[
        ResourceAssociationDescriptor("taxes", {"tax": ["id"]}),
    ],
)


ORDER_CART_RULE = ResourceDescriptor(
    node_name="order_cart_rule",
    name="order_discounts",
    fields=[
        ResourceFieldDescriptor("id_order", required=True),
        ResourceFieldDescriptor("id_cart_rule", required=True),
        ResourceFieldDescriptor("id_order_invoice"),
        ResourceFieldDescriptor("name", required=True),
        ResourceFieldDescriptor("value", required=True),
        ResourceFieldDescriptor("value_tax_excl", required=True),
        ResourceFieldDescriptor("free_shipping"),
    ],
)


ORDER_HISTORY = ResourceDescriptor(
    node_name="order_history",
    name="order_histories",
    fields=[
        ResourceFieldDescriptor("id_employee"),
        ResourceFieldDescriptor("id_order_state", required=True),
        ResourceFieldDescriptor("id_order", required=True),
        ResourceFieldDescriptor("date_add"),
    ],
)


ORDER_INVOICE = ResourceDescriptor(
    node_name="order_invoice",
    name="order_invoices",
    fields=[
        ResourceFieldDescriptor("id_order", required=True),
        ResourceFieldDescriptor("number", required=True),
        ResourceFieldDescriptor("delivery_number"),
        ResourceFieldDescriptor("delivery_date"),
        ResourceFieldDescriptor("total_discount_tax_excl"),
        ResourceFieldDescriptor("total_discount_tax_incl"),
        ResourceFieldDescriptor("total_paid_tax_excl"),
        ResourceFieldDescriptor("total_paid_tax_incl"),
        ResourceFieldDescriptor("total_products"),
        ResourceFieldDescriptor("total_products_wt"),
        ResourceFieldDescriptor("total_shipping_tax_excl"),
        ResourceFieldDescriptor("total_shipping_tax_incl"),
        ResourceFieldDescriptor("shipping_tax_computation_method"),
        ResourceFieldDescriptor("total_wrapping_tax_excl"),
        ResourceFieldDescriptor("total_wrapping_tax_incl"),
        ResourceFieldDescriptor("shop_address"),
        ResourceFieldDescriptor("invoice_address"),
        ResourceFieldDescriptor("delivery_address"),
        ResourceFieldDescriptor("note"),
        ResourceFieldDescriptor("date_add"),
    ],
)


ORDER_PAYMENT = ResourceDescriptor(
    node_name="order_payment",
    name="order_payments",
    fields=[
        ResourceFieldDescriptor("order_reference"),
        ResourceFieldDescriptor("id_currency", required=True),
        ResourceFieldDescriptor("amount", required=True),
        ResourceFieldDescriptor("payment_method"),
        ResourceFieldDescriptor("conversion_rate"),
        ResourceFieldDescriptor("transaction_id"),
        ResourceFieldDescriptor("card_number"),
        ResourceFieldDescriptor("card_brand"),
        ResourceFieldDescriptor("card_expiration"),
        ResourceFieldDescriptor("card_holder"),
        ResourceFieldDescriptor("date_add"),
    ],
)


ORDER_SLIP = ResourceDescriptor(
    node_name="order_slip",
    name="order_slip",
    fields=[
        ResourceFieldDescriptor("id_customer", required=True),
        ResourceFieldDescriptor("id_order", required=True),
        ResourceFieldDescriptor("conversion_rate", required=True),
        ResourceFieldDescriptor("total_products_tax_excl", required=True),
        ResourceFieldDescriptor("total_products_tax_incl", required=True),
        ResourceFieldDescriptor("total_shipping_tax_excl", required=True),
        ResourceFieldDescriptor("total_shipping_tax_incl", required=True),
        ResourceFieldDescriptor("amount"),
        ResourceFieldDescriptor("shipping_cost"),
        ResourceFieldDescriptor("shipping_cost_amount"),
        ResourceFieldDescriptor("partial"),
        ResourceFieldDescriptor("date_add"),
        ResourceFieldDescriptor("date_upd"),
        ResourceFieldDescriptor("order_slip_type"),
    ],
    associations=[
        ResourceAssociationDescriptor(
            "order_slip_details",
            {
                "order_slip_detail": [
                    "id",
                    "id_order_detail",
                    "product_quantity",
                    "amount_tax_excl",
                    "amount_tax_incl",
                ]
            },
        ),
    ],
)


ORDER_STATE = ResourceDescriptor(
    node_name="order_state",
    name="order_states",
    fields=[
        ResourceFieldDescriptor("unremovable"),
        ResourceFieldDescriptor("delivery"),
        ResourceFieldDescriptor("hidden"),
        ResourceFieldDescriptor("send_email"),
        ResourceFieldDescriptor("module_name"),
        ResourceFieldDescriptor("invoice"),
        ResourceFieldDescriptor("color"),
        ResourceFieldDescriptor("logable"),
        ResourceFieldDescriptor("shipped"),
        ResourceFieldDescriptor("paid"),
        ResourceFieldDescriptor("pdf_delivery"),
        ResourceFieldDescriptor("pdf_invoice"),
        ResourceFieldDescriptor("deleted"),
        ResourceFieldDescriptor("name", translatable=True, required=True),
        ResourceFieldDescriptor("template", translatable=True),
    ],
)


ORDER = ResourceDescriptor(
    node_name="order",
    name="orders",
    fields=[
        ResourceFieldDescriptor("id_address_delivery", required=True),
        ResourceFieldDescriptor("id_address_invoice", required=True),
        ResourceFieldDescriptor("id_cart", required=True),
        ResourceFieldDescriptor("id_currency", required=True),
        ResourceFieldDescriptor("id_lang", required=True),
        ResourceFieldDescriptor("id_customer", required=True),
        ResourceFieldDescriptor("id_carrier", required=True),
        ResourceFieldDescriptor("current_state"),
        ResourceFieldDescriptor("module", required=True),
        ResourceFieldDescriptor("invoice_number"),
        ResourceFieldDescriptor("invoice_date"),
        ResourceFieldDescriptor("delivery_number"),
        ResourceFieldDescriptor("delivery_date"),
        ResourceFieldDescriptor("valid"),
        ResourceFieldDescriptor("date_add"),
        ResourceFieldDescriptor("date_upd"),
        ResourceFieldDescriptor("shipping_number"),
        ResourceFieldDescriptor("id_shop_group"),
        ResourceFieldDescriptor("id_shop"),
        ResourceFieldDescriptor("secure_key"),
        ResourceFieldDescriptor("payment", required=True),
        ResourceFieldDescriptor("recyclable"),
        ResourceFieldDescriptor("gift"),
        ResourceFieldDescriptor("gift_message"),
        ResourceFieldDescriptor("mobile_theme"),
        ResourceFieldDescriptor("total_discounts"),
        ResourceFieldDescriptor("total_discounts_tax_incl"),
        ResourceFieldDescriptor("total_discounts_tax_excl"),
        ResourceFieldDescriptor("total_paid", required=True),
        ResourceFieldDescriptor("total_paid_tax_incl"),
        ResourceFieldDescriptor("total_paid_tax_excl"),
        ResourceFieldDescriptor("total_paid_real", required=True),
        ResourceFieldDescriptor("total_products", required=True),
        ResourceFieldDescriptor("total_products_wt", required=True),
        ResourceFieldDescriptor("total_shipping"),
        ResourceFieldDescriptor("total_shipping_tax_incl"),
        ResourceFieldDescriptor("total_shipping_tax_excl"),
        ResourceFieldDescriptor("carrier_tax_rate"),
        ResourceFieldDescriptor("total_wrapping"),
        ResourceFieldDescriptor("total_wrapping_tax_incl"),
        ResourceFieldDescriptor("total_wrapping_tax_excl"),
        ResourceFieldDescriptor("round_mode"),
        ResourceFieldDescriptor("round_type"),
        ResourceFieldDescriptor("conversion_rate", required=True),
        ResourceFieldDescriptor("reference"),
    ],
    associations=[
        ResourceAssociationDescriptor(
            "order_rows",
            {
                "order_row": [
                    "id",
                    "product_id",
                    "product_attribute_id",
                    "product_quantity",
                    "product_name",
                    "product_reference",
                    "product_ean13",
                    "product_upc",
                    "product_price",
                    "unit_price_tax_incl",
                    "unit_price_tax_excl",
                ]
            },
        ),
    ],
)


PRICE_RANGE = ResourceDescriptor(
    node_name="price_range",
    name="price_ranges",
    fields=[
        ResourceFieldDescriptor("id_carrier", required=True),
        ResourceFieldDescriptor("delimiter1", required=True),
        ResourceFieldDescriptor("delimiter2", required=True),
    ],
)


CUSTOMIZATION_FIELD = ResourceDescriptor(
    node_name="customization_field",
    name="product_customization_fields",
    fields=[
        ResourceFieldDescriptor("id_product", required=True),
        ResourceFieldDescriptor("type", required=True),
        ResourceFieldDescriptor("required", required=True),
        ResourceFieldDescriptor("name", translatable=True, required=True),
    ],
)


PRODUCT_FEATURE_VALUE = ResourceDescriptor(
    node_name="product_feature_value",
    name="product_feature_values",
    fields=[
        ResourceFieldDescriptor("id_feature", required=True),
        ResourceFieldDescriptor("custom"),
        ResourceFieldDescriptor("value", translatable=True, required=True),
    ],
)


PRODUCT_FEATURE = ResourceDescriptor(
    node_name="product_feature",
    name="product_features",
    fields=[
        ResourceFieldDescriptor("position"),
        ResourceFieldDescriptor("name", translatable=True, required=True),
    ],
)


PRODUCT_OPTION_VALUE = ResourceDescriptor(
    node_name="product_option_value",
    name="product_option_values",
    fields=[
        ResourceFieldDescriptor("id_attribute_group", required=True),
        ResourceFieldDescriptor("color"),
        ResourceFieldDescriptor("position"),
        ResourceFieldDescriptor("name", translatable=True, required=True),
    ],
)


PRODUCT_OPTION = ResourceDescriptor(
    node_name="product_option",
    name="product_options",
    fields=[
        ResourceFieldDescriptor("is_color_group"),
        ResourceFieldDescriptor("group_type", required=True),
        ResourceFieldDescriptor("position"),
        ResourceFieldDescriptor("name", translatable=True, required=True),
        ResourceFieldDescriptor("public_name", translatable=True, required=True),
    ],
    associations=[
        ResourceAssociationDescriptor("product_option_values", {"product_option_value": ["id"]}),
    ],
)


PRODUCT_SUPPLIER = ResourceDescriptor(
    node_name="product_supplier",
    name="product_suppliers",
    fields=[
        ResourceFieldDescriptor("id_product", required=True),
        ResourceFieldDescriptor("id_product_attribute", required=True),
        ResourceFieldDescriptor("id_supplier", required=True),
        ResourceFieldDescriptor("id_currency"),
        ResourceFieldDescriptor("product_supplier_reference"),
        ResourceFieldDescriptor("product_supplier_price_te"),
    ],
)


PRODUCT = ResourceDescriptor(
    node_name="product",
    name="products",
    fields=[
        ResourceFieldDescriptor("id_manufacturer"),
        ResourceFieldDescriptor("id_supplier"),
        ResourceFieldDescriptor("id_category_default"),
        ResourceFieldDescriptor("ps_new"),
        ResourceFieldDescriptor("cache_default_attribute"),
        ResourceFieldDescriptor("id_default_image"),
        ResourceFieldDescriptor("id_default_combination"),
        ResourceFieldDescriptor("id_tax_rules_group"),
        ResourceFieldDescriptor("position_in_category"),
        ResourceFieldDescriptor("manufacturer_name", read_only=True),
        ResourceFieldDescriptor("quantity", read_only=True),
        ResourceFieldDescriptor("type"),
        ResourceFieldDescriptor("id_shop_default"),
        ResourceFieldDescriptor("reference"),
        ResourceFieldDescriptor("supplier_reference"),
        ResourceFieldDescriptor("location"),
        ResourceFieldDescriptor("width"),
        ResourceFieldDescriptor("height"),
        ResourceFieldDescriptor("depth"),
        ResourceFieldDescriptor("weight"),
        ResourceFieldDescriptor("quantity_discount"),
        ResourceFieldDescriptor("ean13"),
        ResourceFieldDescriptor("upc"),
        ResourceFieldDescriptor("cache_is_pack"),
        ResourceFieldDescriptor("cache_has_attachments"),
        ResourceFieldDescriptor("is_virtual"),
        ResourceFieldDescriptor("on_sale"),
        ResourceFieldDescriptor("online_only"),
        ResourceFieldDescriptor("ecotax"),
        ResourceFieldDescriptor("minimal_quantity"),
        ResourceFieldDescriptor("price", required=True),
        ResourceFieldDescriptor("wholesale_price"),
        ResourceFieldDescriptor("unity"),
        ResourceFieldDescriptor("unit_price_ratio"),
        ResourceFieldDescriptor("additional_shipping_cost"),
        ResourceFieldDescriptor("customizable"),
        ResourceFieldDescriptor("text_fields"),
        ResourceFieldDescriptor("uploadable_files"),
        ResourceFieldDescriptor("active"),
        ResourceFieldDescriptor("redirect_type"),
        ResourceFieldDescriptor("id_product_redirected"),
        ResourceFieldDescriptor("available_for_order"),
        ResourceFieldDescriptor("available_date"),
        ResourceFieldDescriptor("condition"),
        ResourceFieldDescriptor("show_price"),
        ResourceFieldDescriptor("indexed"),
        ResourceFieldDescriptor("visibility"),
        ResourceFieldDescriptor("advanced_stock_management"),
        ResourceFieldDescriptor("date_add"),
        ResourceFieldDescriptor("date_upd"),
        ResourceFieldDescriptor("pack_stock_type"),
        ResourceFieldDescriptor("meta_description", translatable=True),
        ResourceFieldDescriptor("meta_keywords", translatable=True),
        ResourceFieldDescriptor("meta_title", translatable=True),
        ResourceFieldDescriptor("link_rewrite", translatable=True, required=True),
        ResourceFieldDescriptor("name", translatable=True, required=True),
        ResourceFieldDescriptor("description", translatable=True),
        ResourceFieldDescriptor("description_short", translatable=True),
        ResourceFieldDescriptor("available_now", translatable=True),
        ResourceFieldDescriptor("available_later", translatable=True),
    ],
    associations=[
        ResourceAssociationDescriptor("categories", {"category": ["id"]}),
        ResourceAssociationDescriptor("images", {"image": ["id"]}),
        ResourceAssociationDescriptor("combinations", {"combination": ["id"]}),
        ResourceAssociationDescriptor("product_option_values", {"product_option_value": ["id"]}),
        ResourceAssociationDescriptor(
            "product_features",
            {
                "product_feature": [
                    "id",
                    "id_feature_value",
                ]
            },
        ),
        ResourceAssociationDescriptor("tags", {"tag": ["id"]}),
        ResourceAssociationDescriptor(
            "stock_availables",
            {
                "stock_available": [
                    "id",
                    "id_product_attribute",
                ]
            },
        ),
        ResourceAssociationDescriptor("accessories", {"product": ["id"]}),
        ResourceAssociationDescriptor("product_bundle", {"product": ["id", "quantity"]}),
    ],
)


SHOP_GROUP = ResourceDescriptor(
    node_name="shop_group",
    name="shop_groups",
    fields=[
        ResourceFieldDescriptor("name", required=True),
        ResourceFieldDescriptor("share_customer"),
        ResourceFieldDescriptor("share_order"),
        ResourceFieldDescriptor("share_stock"),
        ResourceFieldDescriptor("active"),
        ResourceFieldDescriptor("deleted"),
    ],
)


SHOP_URL = ResourceDescriptor(
    node_name="shop_url",
    name="shop_urls",
    fields=[
        ResourceFieldDescriptor("id_shop", required=True),
        ResourceFieldDescriptor("active"),
        ResourceFieldDescriptor("main"),
        ResourceFieldDescriptor("domain", required=True),
        ResourceFieldDescriptor("domain_ssl"),
        ResourceFieldDescriptor("physical_uri"),
        ResourceFieldDescriptor("virtual_uri"),
    ],
)


SHOP = ResourceDescriptor(
    node_name="shop",
    name="shops",
    fields=[
        ResourceFieldDescriptor("id_shop_group", required=True),
        ResourceFieldDescriptor("id_category", required=True),
        ResourceFieldDescriptor("id_theme", required=True),
        ResourceFieldDescriptor("active"),
        ResourceFieldDescriptor("deleted"),
        ResourceFieldDescriptor("name", required=True),
    ],
)


SPECIFIC_PRICE_RULE = ResourceDescriptor(
    node_name="specific_price_rule",
    name="specific_price_rules",
    fields=[
        ResourceFieldDescriptor("id_shop", required=True),
        ResourceFieldDescriptor("id_country", required=True),
        ResourceFieldDescriptor("id_currency", required=True),
        ResourceFieldDescriptor("id_group", required=True),
        ResourceFieldDescriptor("name", required=True),
        ResourceFieldDescriptor("from_quantity", required=True),
        ResourceFieldDescriptor("price", required=True),
        ResourceFieldDescriptor("reduction", required=True),
        ResourceFieldDescriptor("reduction_tax", required=True),
        ResourceFieldDescriptor("reduction_type", required=True),
        ResourceFieldDescriptor("from"),
        ResourceFieldDescriptor("to"),
    ],
)


SPECIFIC_PRICE = ResourceDescriptor(
    node_name="specific_price",
    name="specific_prices",
    fields=[
        ResourceFieldDescriptor("id_shop_group"),
        ResourceFieldDescriptor("id_shop", required=True),
        ResourceFieldDescriptor("id_cart", required=True),
        ResourceFieldDescriptor("id_product", required=True),
        ResourceFieldDescriptor("id_product_attribute"),
        ResourceFieldDescriptor("id_currency", required=True),
        ResourceFieldDescriptor("id_country", required=True),
        ResourceFieldDescriptor("id_group", required=True),
        ResourceFieldDescriptor("id_customer", required=True),
        ResourceFieldDescriptor("id_specific_price_rule"),
        ResourceFieldDescriptor("price", required=True),
        ResourceFieldDescriptor("from_quantity", required=True),
        ResourceFieldDescriptor("reduction", required=True),
        ResourceFieldDescriptor("reduction_tax", required=True),
        ResourceFieldDescriptor("reduction_type", required=True),
        ResourceFieldDescriptor("from", required=True),
        ResourceFieldDescriptor("to", required=True),
    ],
)


STATE = ResourceDescriptor(
    node_name="state",
    name="states",
    fields=[
        ResourceFieldDescriptor("id_zone", required=True),
        ResourceFieldDescriptor("id_country", required=True),
        ResourceFieldDescriptor("iso_code", required=True),
        ResourceFieldDescriptor("name", required=True),
        ResourceFieldDescriptor("active"),
    ],
)


STOCK_AVAILABLE = ResourceDescriptor(
    node_name="stock_available",
    name="stock_availables",
    fields=[
        ResourceFieldDescriptor("id_product", required=True),
        ResourceFieldDescriptor("id_product_attribute", required=True),
        ResourceFieldDescriptor("id_shop"),
        ResourceFieldDescriptor("id_shop_group"),
        ResourceFieldDescriptor("quantity", required=True),
        ResourceFieldDescriptor("depends_on_stock", required=True),
        ResourceFieldDescriptor("out_of_stock", required=True),
    ],
)


STOCK_MOVEMENT_REASON = ResourceDescriptor(
    node_name="stock_movement_reason",
    name="stock_movement_reasons",
    fields=[
        ResourceFieldDescriptor("sign"),
        ResourceFieldDescriptor("deleted"),
        ResourceFieldDescriptor("date_add"),
        ResourceFieldDescriptor("date_upd"),
        ResourceFieldDescriptor("name", translatable=True, required=True),
    ],
)


STOCK_MVT = ResourceDescriptor(
    node_name="stock_mvt",
    name="stock_movements",
    fields=[
        ResourceFieldDescriptor("id_product"),
        ResourceFieldDescriptor("id_product_attribute"),
        ResourceFieldDescriptor("id_warehouse"),
        ResourceFieldDescriptor("id_currency"),
        ResourceFieldDescriptor("management_type"),
        ResourceFieldDescriptor("id_employee", required=True),
        ResourceFieldDescriptor("id_stock", required=True),
        ResourceFieldDescriptor("id_stock_mvt_reason", required=True),
        ResourceFieldDescriptor("id_order"),
        ResourceFieldDescriptor("id_supply_order"),
        ResourceFieldDescriptor("product_name", translatable=True),
        ResourceFieldDescriptor("ean13"),
        ResourceFieldDescriptor("upc"),
        ResourceFieldDescriptor("reference"),
        ResourceFieldDescriptor("physical_quantity", required=True),
        ResourceFieldDescriptor("sign", required=True),
        ResourceFieldDescriptor("last_wa"),
        ResourceFieldDescriptor("current_wa"),
        ResourceFieldDescriptor("price_te", required=True),
        ResourceFieldDescriptor("date_add", required=True),
    ],
)


STOCK = ResourceDescriptor(
    node_name="stock",
    name="stocks",
    fields=[
        ResourceFieldDescriptor("id_warehouse", required=True),
        ResourceFieldDescriptor("id_product", required=True),
        ResourceFieldDescriptor("id_product_attribute", required=True),
        ResourceFieldDescriptor("real_quantity", read_only=True),
        ResourceFieldDescriptor("reference"),
        ResourceFieldDescriptor("ean13"),
        ResourceFieldDescriptor("upc"),
        ResourceFieldDescriptor("physical_quantity", required=True),
        ResourceFieldDescriptor("usable_quantity", required=True),
        ResourceFieldDescriptor("price_te", required=True),
    ],
)


STORE = ResourceDescriptor(
    node_name="store",
    name="stores",
    fields=[
        ResourceFieldDescriptor("id_country", required=True),
        ResourceFieldDescriptor("id_state"),
        ResourceFieldDescriptor("hours"),
        ResourceFieldDescriptor("name", required=True),
        ResourceFieldDescriptor("address1", required=True),
        ResourceFieldDescriptor("address2"),
        ResourceFieldDescriptor("postcode"),
        ResourceFieldDescriptor("city", required=True),
        ResourceFieldDescriptor("latitude"),
        ResourceFieldDescriptor("longitude"),
        ResourceFieldDescriptor("phone"),
        ResourceFieldDescriptor("fax"),
        ResourceFieldDescriptor("note"),
        ResourceFieldDescriptor("email"),
        ResourceFieldDescriptor("active", required=True),
        ResourceFieldDescriptor("date_add"),
        ResourceFieldDescriptor("date_upd"),
    ],
)


SUPPLIER = ResourceDescriptor(
    node_name="supplier",
    name="suppliers",
    fields=[
        ResourceFieldDescriptor("link_rewrite"),
        ResourceFieldDescriptor("name", required=True),
        ResourceFieldDescriptor("active"),
        ResourceFieldDescriptor("date_add"),
        ResourceFieldDescriptor("date_upd"),
        ResourceFieldDescriptor("description", translatable=True),
        ResourceFieldDescriptor("meta_title", translatable=True),
        ResourceFieldDescriptor("meta_description", translatable=True),
        ResourceFieldDescriptor("meta_keywords", translatable=True),
    ],
)


SUPPLY_ORDER_DETAIL = ResourceDescriptor(
    node_name="supply_order_detail",
    name="supply_order_details",
    fields=[
        ResourceFieldDescriptor("id_supply_order", required=True),
        ResourceFieldDescriptor("id_product", required=True),
        ResourceFieldDescriptor("id_product_attribute", required=True),
        ResourceFieldDescriptor("reference"),
        ResourceFieldDescriptor("supplier_reference"),
        ResourceFieldDescriptor("name", required=True),
        ResourceFieldDescriptor("ean13"),
        ResourceFieldDescriptor("upc"),
        ResourceFieldDescriptor("exchange_rate", required=True),
        ResourceFieldDescriptor("unit_price_te", required=True),
        ResourceFieldDescriptor("quantity_expected", required=True),
        ResourceFieldDescriptor("quantity_received"),
        ResourceFieldDescriptor("price_te", required=True),
        ResourceFieldDescriptor("discount_rate", required=True),
        ResourceFieldDescriptor("discount_value_te", required=True),
        ResourceFieldDescriptor("price_with_discount_te", required=True),
        ResourceFieldDescriptor("tax_rate", required=True),
        ResourceFieldDescriptor("tax_value", required=True),
        ResourceFieldDescriptor("price_ti", required=True),
        ResourceFieldDescriptor("tax_value_with_order_discount", required=True),
        ResourceFieldDescriptor("price_with_order_discount_te", required=True),
    ],
)


SUPPLY_ORDER_HISTORY = ResourceDescriptor(
    node_name="supply_order_history",
    name="supply_order_histories",
    fields=[
        ResourceFieldDescriptor("id_supply_order", required=True),
        ResourceFieldDescriptor("id_employee", required=True),
        ResourceFieldDescriptor("id_state", required=True),
        ResourceFieldDescriptor("employee_firstname"),
        ResourceFieldDescriptor("employee_lastname"),
        ResourceFieldDescriptor("date_add", required=True),
    ],
)


SUPPLY_ORDER_RECEIPT_HISTORY = ResourceDescriptor(
    node_name="supply_order_receipt_history",
    name="supply_order_receipt_histories",
    fields=[
        ResourceFieldDescriptor("id_supply_order_detail", required=True),
        ResourceFieldDescriptor("id_employee", required=True),
        ResourceFieldDescriptor("id_supply_order_state", required=True),
        ResourceFieldDescriptor("employee_firstname"),
        ResourceFieldDescriptor("employee_lastname"),
        ResourceFieldDescriptor("quantity", required=True),
        ResourceFieldDescriptor("date_add"),
    ],
)


SUPPLY_ORDER_STATE = ResourceDescriptor(
    node_name="supply_order_state",
    name="supply_order_states",
    fields=[
        ResourceFieldDescriptor("delivery_note"),
        ResourceFieldDescriptor("editable"),
        ResourceFieldDescriptor("receipt_state"),
        ResourceFieldDescriptor("pending_receipt"),
        ResourceFieldDescriptor("enclosed"),
        ResourceFieldDescriptor("color"),
        ResourceFieldDescriptor("name", translatable=True, required=True),
    ],
)


SUPPLY_ORDER = ResourceDescriptor(
    node_name="supply_order",
    name="supply_orders",
    fields=[
        ResourceFieldDescriptor("id_supplier", required=True),
        ResourceFieldDescriptor("id_lang", required=True),
        ResourceFieldDescriptor("id_warehouse", required=True),
        ResourceFieldDescriptor("id_supply_order_state", required=True),
        ResourceFieldDescriptor("id_currency", required=True),
        ResourceFieldDescriptor("supplier_name"),
        ResourceFieldDescriptor("reference", required=True),
        ResourceFieldDescriptor("date_delivery_expected", required=True),
        ResourceFieldDescriptor("total_te"),
        ResourceFieldDescriptor("total_with_discount_te"),
        ResourceFieldDescriptor("total_ti"),
        ResourceFieldDescriptor("total_tax"),
        ResourceFieldDescriptor("discount_rate"),
        ResourceFieldDescriptor("discount_value_te"),
        ResourceFieldDescriptor("is_template"),
        ResourceFieldDescriptor("date_add"),
        ResourceFieldDescriptor("date_upd"),
    ],
    associations=[
        ResourceAssociationDescriptor(
            "supply_order_details",
            {
                "supply_order_detail": [
                    "id",
                    "id_product",
                    "id_product_attribute",
                    "supplier_reference",
                    "product_name",
                ]
            },
        ),
    ],
)


TAG = ResourceDescriptor(
    node_name="tag",
    name="tags",
    fields=[
        ResourceFieldDescriptor("id_lang", required=True),
        ResourceFieldDescriptor("name", required=True),
    ],
)


TAX_RULE_GROUP = ResourceDescriptor(
    node_name="tax_rule_group",
    name="tax_rule_groups",
    fields=[
        ResourceFieldDescriptor("name", required=True),
        ResourceFieldDescriptor("active"),
        ResourceFieldDescriptor("deleted"),
        ResourceFieldDescriptor("date_add"),
        ResourceFieldDescriptor("date_upd"),
    ],
)


TAX_RULE = ResourceDescriptor(
    node_name="tax_rule",
    name="tax_rules",
    fields=[
        ResourceFieldDescriptor("id_tax_rules_group", required=True),
        ResourceFieldDescriptor("id_state"),
        ResourceFieldDescriptor("id_country", required=True),
        ResourceFieldDescriptor("zipcode_from"),
        ResourceFieldDescriptor("zipcode_to"),
        ResourceFieldDescriptor("id_tax", required=True),
        ResourceFieldDescriptor("behavior"),
        ResourceFieldDescriptor("description"),
    ],
)


TAX = ResourceDescriptor(
    node_name="tax",
    name="taxes",
    fields=[
        ResourceFieldDescriptor("rate", required=True),
        ResourceFieldDescriptor("active"),
        ResourceFieldDescriptor("deleted"),
        ResourceFieldDescriptor("name", translatable=True, required=True),
    ],
)


TRANSLATED_CONFIGURATION = ResourceDescriptor(
    node_name="translated_configuration",
    name="translated_configurations",
    fields=[
        ResourceFieldDescriptor("value", translatable=True),
        ResourceFieldDescriptor("date_add"),
        ResourceFieldDescriptor("date_upd"),
        ResourceFieldDescriptor("name", required=True),
        ResourceFieldDescriptor("id_shop_group"),
        ResourceFieldDescriptor("id_shop"),
    ],
)


WAREHOUSE_PRODUCT_LOCATION = ResourceDescriptor(
    node_name="warehouse_product_location",
    name="warehouse_product_locations",
    fields=[
        ResourceFieldDescriptor("id_product", required=True),
        ResourceFieldDescriptor("id_product_attribute", required=True),
        ResourceFieldDescriptor("id_warehouse", required=True),
        ResourceFieldDescriptor("location"),
    ],
)


WAREHOUSE = ResourceDescriptor(
    node_name="warehouse",
    name="warehouses",
    fields=[
        ResourceFieldDescriptor("id_address", required=True),
        ResourceFieldDescriptor("id_employee", required=True),
        ResourceFieldDescriptor("id_currency", required=True),
        ResourceFieldDescriptor("valuation", read_only=True),
        ResourceFieldDescriptor("deleted"),
        ResourceFieldDescriptor("reference", required=True),
        ResourceFieldDescriptor("name", required=True),
        ResourceFieldDescriptor("management_type", required=True),
    ],
    associations=[
        ResourceAssociationDescriptor("stocks", {"stock": ["id"]}),
        ResourceAssociationDescriptor("carriers", {"carrier": ["id"]}),
        ResourceAssociationDescriptor("shops", {"shop": ["id", "name"]}),
    ],
)


WEIGHT_RANGE = ResourceDescriptor(
    node_name="weight_range",
    name="weight_ranges",
    fields=[
        ResourceFieldDescriptor("id_carrier", required=True),
        ResourceFieldDescriptor("delimiter1", required=True),
        ResourceFieldDescriptor("delimiter2", required=True),
    ],
)


ZONE = ResourceDescriptor(
    node_name="zone",
    name="zones",
    fields=[
        ResourceFieldDescriptor("name", required=True),
        ResourceFieldDescriptor("active"),
    ],
)


class ResourceRegistry(typing.Mapping[str, ResourceDescriptor]):
    """
    A read-only mapping of collection names to :py:class:`ResourceDescriptor`s.

    :param Iterable[ResourceDescriptor] descriptors: the descriptors to register.
    """

    _by_name: typing.Dict[str, ResourceDescriptor]
    _by_node_name: typing.Dict[str, ResourceDescriptor]

    def __getitem__(self, name: str) -> ResourceDescriptor:
        return self._by_name[name]

    def __iter__(self) -> typing.Iterator[str]:
        return iter(self._by_name)

    def __len__(self) -> int:
        return len(self._by_name)

    def by_node_name(self, node_name: str) -> ResourceDescriptor:
        return self._by_node_name[node_name]

    def __init__(self, descriptors: typing.Iterable[ResourceDescriptor]):
        self._by_name = {}
        self._by_node_name = {}
        for descr in descriptors:
            if descr.name in self._by_name:
                raise ValueError(f'resource "{descr.name}" is registered twice')
            self._by_name[descr.name] = descr
            self._by_node_name[descr.node_name] = descr


REGISTRY = ResourceRegistry(
    [
        ADDRESS,
        CARRIER,
        CART_RULE,
        CART,
        CATEGORY,
        COMBINATION,
        CONFIGURATION,
        CONTACT,
        CONTENT,
        COUNTRY,
        CURRENCY,
        CUSTOMER_MESSAGE,
        CUSTOMER_THREAD,
        CUSTOMER,
        CUSTOMIZATION,
        DELIVERY,
        EMPLOYEE,
        GROUP,
        GUEST,
        IMAGE_TYPE,
        LANGUAGE,
        MANUFACTURER,
        ORDER_CARRIER,
        ORDER_DETAIL,
        ORDER_CART_RULE,
        ORDER_HISTORY,
        ORDER_INVOICE,
        ORDER_PAYMENT,
        ORDER_SLIP,
        ORDER_STATE,
        ORDER,
        PRICE_RANGE,
        CUSTOMIZATION_FIELD,
        PRODUCT_FEATURE_VALUE,
        PRODUCT_FEATURE,
        PRODUCT_OPTION_VALUE,
        PRODUCT_OPTION,
        PRODUCT_SUPPLIER,
        PRODUCT,
        SHOP_GROUP,
        SHOP_URL,
        SHOP,
        SPECIFIC_PRICE_RULE,
        SPECIFIC_PRICE,
        STATE,
        STOCK_AVAILABLE,
        STOCK_MOVEMENT_REASON,
        STOCK_MVT,
        STOCK,
        STORE,
        SUPPLIER,
        SUPPLY_ORDER_DETAIL,
        SUPPLY_ORDER_HISTORY,
        SUPPLY_ORDER_RECEIPT_HISTORY,
        SUPPLY_ORDER_STATE,
        SUPPLY_ORDER,
        TAG,
        TAX_RULE_GROUP,
        TAX_RULE,
        TAX,
        TRANSLATED_CONFIGURATION,
        WAREHOUSE_PRODUCT_LOCATION,
        WAREHOUSE,
        WEIGHT_RANGE,
        ZONE,
    ]
)
