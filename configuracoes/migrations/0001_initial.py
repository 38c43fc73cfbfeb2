from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ConfiguracaoSite",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("telefone", models.CharField(blank=True, max_length=32, verbose_name="WhatsApp")),
                ("instagram", models.CharField(blank=True, max_length=120)),
                ("endereco", models.CharField(blank=True, max_length=255)),
                ("banner_url", models.URLField(blank=True, max_length=500, null=True)),
                ("pix_chave", models.CharField(blank=True, max_length=120, null=True, verbose_name="Chave PIX")),
                ("pix_recebedor", models.CharField(blank=True, max_length=120, null=True, verbose_name="Nome do recebedor")),
                ("pix_cidade", models.CharField(default="João Pessoa", max_length=60, verbose_name="Cidade do PIX")),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Configuração do site",
                "verbose_name_plural": "Configurações do site",
            },
        ),
    ]
