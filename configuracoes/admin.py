# configuracoes/admin.py
from django.contrib import admin

from .forms import ConfiguracaoSiteForm
from .models import ConfiguracaoSite


@admin.register(ConfiguracaoSite)
class ConfiguracaoSiteAdmin(admin.ModelAdmin):
    form = ConfiguracaoSiteForm
    list_display = ("__str__", "telefone", "instagram", "pix_disponivel", "updated_at")
    readonly_fields = ("updated_at",)
    fieldsets = (
        ("Contato", {"fields": ("telefone", "instagram", "endereco", "banner_url")}),
        ("PIX", {"fields": ("pix_chave", "pix_recebedor", "pix_cidade")}),
        ("Auditoria", {"classes": ("collapse",), "fields": ("updated_at",)}),
    )

    @admin.display(boolean=True, description="PIX")
    def pix_disponivel(self, obj: ConfiguracaoSite):
        return obj.pix_disponivel

    # linha única: sem "adicionar" depois que existe, sem excluir
    def has_add_permission(self, request):
        return not ConfiguracaoSite.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False
