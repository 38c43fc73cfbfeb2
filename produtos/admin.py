# produtos/admin.py
from django.contrib import admin, messages

from .models import Produto


@admin.register(Produto)
class ProdutoAdmin(admin.ModelAdmin):
    list_display = ("nome", "preco", "ativo", "created_at")
    list_filter = ("ativo",)
    search_fields = ("nome", "descricao")
    list_editable = ("preco", "ativo")
    readonly_fields = ("created_at", "updated_at")
    fieldsets = (
        (None, {"fields": ("nome", "descricao", "imagem_url")}),
        ("Preço", {"fields": ("preco",)}),
        ("Status", {"fields": ("ativo",)}),
        ("Auditoria", {"classes": ("collapse",), "fields": ("created_at", "updated_at")}),
    )
    actions = ("ativar", "desativar")

    @admin.action(description="Ativar selecionados")
    def ativar(self, request, queryset):
        n = queryset.update(ativo=True)
        self.message_user(request, f"{n} produto(s) ativado(s).", level=messages.SUCCESS)

    @admin.action(description="Desativar selecionados")
    def desativar(self, request, queryset):
        n = queryset.update(ativo=False)
        self.message_user(request, f"{n} produto(s) desativado(s).", level=messages.SUCCESS)
